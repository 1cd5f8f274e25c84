# horeca/api/v1/dependencies/auth.py
from typing import Optional
from fastapi import Cookie, Depends, HTTPException, status

from horeca.services.auth_service import AuthService
from horeca.schemas.business import TenantContext
from horeca.core.config import settings
from horeca.exceptions.auth_exceptions import (
    InvalidSessionError,
    SessionExpiredError
)


async def get_session_token(
        session_id: Optional[str] = Cookie(None, alias=settings.SESSION_COOKIE_NAME)
) -> str:
    """
    Extract session token from cookie.

    Args:
        session_id: Session ID from cookie

    Returns:
        Session token

    Raises:
        HTTPException: If session token is missing
    """
    if not session_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated"
        )
    return session_id


async def get_tenant(
        session_token: str = Depends(get_session_token)
) -> TenantContext:
    """
    Resolve the authenticated business for this request.

    Every tenant-scoped endpoint takes the business id from here and
    never from the request body or path.

    Args:
        session_token: Session token from cookie

    Returns:
        TenantContext of the logged-in business

    Raises:
        HTTPException: If session is invalid or expired
    """
    try:
        return await AuthService.get_tenant(session_token)
    except (InvalidSessionError, SessionExpiredError) as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e)
        )
