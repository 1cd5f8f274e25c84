# horeca/core/security.py
import secrets
import hashlib
from datetime import datetime, timedelta, timezone

import bcrypt

from horeca.core.config import settings


def hash_password(password: str) -> str:
    """
    Hash a password with bcrypt.

    Args:
        password: Plain password

    Returns:
        bcrypt hash as string
    """
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check a plain password against a stored bcrypt hash.

    Args:
        password: Plain password
        password_hash: Stored hash

    Returns:
        True if password matches
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # malformed stored hash
        return False


# Checked when the email is unknown so a failed login costs the same either way
DUMMY_PASSWORD_HASH = hash_password(secrets.token_hex(16))


def generate_session_id() -> str:
    """
    Generate a cryptographically secure session ID.

    Returns:
        64-character hexadecimal session ID
    """
    return secrets.token_hex(32)


def hash_session_id(session_id: str) -> str:
    """
    Hash session ID for storage in database.

    Args:
        session_id: Plain session ID

    Returns:
        SHA-256 hash of session ID
    """
    return hashlib.sha256(session_id.encode()).hexdigest()


def get_session_expiry() -> datetime:
    """
    Calculate session expiry datetime.

    Returns:
        Datetime when session should expire (timezone-aware UTC)
    """
    return datetime.now(timezone.utc) + timedelta(seconds=settings.SESSION_MAX_AGE)


def get_current_utc_time() -> datetime:
    """
    Get current UTC time as timezone-aware datetime.

    Returns:
        Current UTC datetime
    """
    return datetime.now(timezone.utc)
