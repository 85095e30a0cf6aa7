from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from sqlalchemy.orm import Session
from structlog import get_logger

from realty.core.config import get_settings
from realty.core.database import get_db
from realty.core.deps import AuthError, oauth2_scheme, resolve_admin, token_from_request
from realty.core.rate_limit import limiter
from realty.core.security import create_access_token
from realty.schemas.auth import AdminInfo, AuthCheckResponse, LoginRequest, LoginResponse, MessageResponse
from realty.services.admins import authenticate

logger = get_logger()

router = APIRouter(prefix="/auth", tags=["auth"])


def _client_ip(request: Request) -> str | None:
    return request.client.host if request.client else None


@router.post("/login", response_model=LoginResponse)
@limiter.limit(get_settings().LOGIN_RATE_LIMIT)
def login(request: Request, response: Response, payload: LoginRequest, db: Session = Depends(get_db)):
    settings = get_settings()
    admin = authenticate(db, payload.username, payload.password)
    if admin is None:
        logger.warning("Login failed", username=payload.username or settings.ADMIN_USERNAME, ip=_client_ip(request))
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = create_access_token(admin.id, timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS))
    max_age_days = settings.REMEMBER_ME_MAX_AGE_DAYS if payload.remember_me else settings.SESSION_MAX_AGE_DAYS
    response.set_cookie(
        settings.AUTH_COOKIE_NAME,
        token,
        max_age=int(timedelta(days=max_age_days).total_seconds()),
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
        path="/",
    )
    logger.info("Login succeeded", admin=admin.username, ip=_client_ip(request), remember_me=payload.remember_me)
    return LoginResponse(message="Login successful", token=token, admin=AdminInfo.model_validate(admin))


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response):
    settings = get_settings()
    response.delete_cookie(
        settings.AUTH_COOKIE_NAME,
        path="/",
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
    )
    return {"message": "Logout successful"}


@router.get("/check", response_model=AuthCheckResponse)
def check(
    request: Request,
    db: Session = Depends(get_db),
    bearer: str | None = Depends(oauth2_scheme),
):
    token = token_from_request(request, bearer)
    if not token:
        return AuthCheckResponse(message="No session found", is_authenticated=False)
    try:
        admin = resolve_admin(db, token)
    except AuthError:
        return AuthCheckResponse(message="Invalid or expired session", is_authenticated=False)
    return AuthCheckResponse(message="Authenticated", is_authenticated=True, admin=AdminInfo.model_validate(admin))
