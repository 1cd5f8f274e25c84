# horeca/services/auth_service.py
import logging
from typing import Optional
from fastapi import Request

from horeca.models.business import Business, Session
from horeca.schemas.business import LoginSchema, SessionUserSchema, TenantContext
from horeca.core.security import (
    generate_session_id,
    hash_session_id,
    get_session_expiry,
    get_current_utc_time,
    verify_password,
    DUMMY_PASSWORD_HASH
)
from horeca.exceptions.auth_exceptions import (
    InvalidCredentialsError,
    InvalidSessionError,
    SessionExpiredError
)

logger = logging.getLogger(__name__)


class AuthService:
    """Service for password login and session management."""

    @staticmethod
    async def login(data: LoginSchema, request: Request) -> tuple[str, Business]:
        """
        Check credentials and open a session.

        Args:
            data: Login request data
            request: FastAPI request object

        Returns:
            Tuple of (session_token, business)

        Raises:
            InvalidCredentialsError: If email is unknown or password is wrong
        """
        business = await Business.get_or_none(email=data.email)

        password_hash = business.password_hash if business else DUMMY_PASSWORD_HASH
        password_ok = verify_password(data.password, password_hash)

        if not business or not password_ok:
            logger.info("Failed login attempt")
            raise InvalidCredentialsError()

        session_token, _ = await AuthService.create_session(business, request)
        logger.info(f"Business {business.id} logged in")

        return session_token, business

    @staticmethod
    async def create_session(
        business: Business,
        request: Request
    ) -> tuple[str, Session]:
        """
        Create a new session for business.

        Args:
            business: Business to create session for
            request: FastAPI request object

        Returns:
            Tuple of (session_token, session_instance)
        """
        session_token = generate_session_id()

        user_agent = request.headers.get("user-agent")
        ip_address = request.client.host if request.client else None

        session = await Session.create(
            business=business,
            session_token_hash=hash_session_id(session_token),
            data=SessionUserSchema.from_orm_business(business).model_dump(),
            expires_at=get_session_expiry(),
            user_agent=user_agent,
            ip_address=ip_address
        )

        return session_token, session

    @staticmethod
    async def get_session_by_token(session_token: str) -> Session:
        """
        Get session by token.

        Args:
            session_token: Session token

        Returns:
            Session instance

        Raises:
            InvalidSessionError: If session doesn't exist
            SessionExpiredError: If session is expired
        """
        session = await Session.get_or_none(
            session_token_hash=hash_session_id(session_token)
        )

        if not session:
            raise InvalidSessionError()

        if session.is_expired():
            await session.delete()
            raise SessionExpiredError()

        session.last_activity = get_current_utc_time()
        await session.save(update_fields=["last_activity"])

        return session

    @staticmethod
    async def get_tenant(session_token: Optional[str]) -> TenantContext:
        """
        Resolve the calling business from a session token.

        Args:
            session_token: Session token from cookie

        Returns:
            TenantContext of the session's business

        Raises:
            InvalidSessionError: If session is missing or invalid
            SessionExpiredError: If session is expired
        """
        if not session_token:
            raise InvalidSessionError()

        session = await AuthService.get_session_by_token(session_token)

        return TenantContext(
            business_id=session.business_id,
            user=SessionUserSchema(**session.data)
        )

    @staticmethod
    async def logout(session_token: str) -> None:
        """
        Logout by deleting session.

        Args:
            session_token: Session token to invalidate
        """
        await Session.filter(session_token_hash=hash_session_id(session_token)).delete()

