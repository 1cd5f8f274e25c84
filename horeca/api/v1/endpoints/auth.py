# horeca/api/v1/endpoints/auth.py
from fastapi import APIRouter, HTTPException, status, Response, Request, Depends

from horeca.schemas.business import LoginSchema, LoginResponseSchema, TenantContext
from horeca.services.auth_service import AuthService
from horeca.api.v1.dependencies.auth import get_tenant, get_session_token
from horeca.core.config import settings
from horeca.exceptions.auth_exceptions import InvalidCredentialsError

router = APIRouter(tags=["authentication"])


def set_session_cookie(response: Response, session_token: str) -> None:
    """Set session cookie in response."""
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=session_token,
        max_age=settings.SESSION_MAX_AGE,
        httponly=settings.SESSION_COOKIE_HTTPONLY,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite=settings.SESSION_COOKIE_SAMESITE,
        domain=settings.SESSION_COOKIE_DOMAIN
    )


def clear_session_cookie(response: Response) -> None:
    """Clear session cookie from response."""
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        domain=settings.SESSION_COOKIE_DOMAIN
    )


@router.post("/login", response_model=LoginResponseSchema, operation_id="login")
async def login(
    data: LoginSchema,
    request: Request,
    response: Response
) -> LoginResponseSchema:
    """Check email and password and start a session."""
    try:
        session_token, business = await AuthService.login(data, request)
    except InvalidCredentialsError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e)
        )

    set_session_cookie(response, session_token)
    return LoginResponseSchema(business_id=business.id, horeca_name=business.horeca_name)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT, operation_id="logout")
async def logout(
    response: Response,
    session_token: str = Depends(get_session_token)
) -> None:
    """Logout by invalidating session."""
    await AuthService.logout(session_token)
    clear_session_cookie(response)


@router.get("/user", operation_id="getCurrentUser")
async def get_current_user_info(tenant: TenantContext = Depends(get_tenant)) -> dict:
    """Session data of the logged-in business."""
    return {"user": tenant.user.model_dump()}
