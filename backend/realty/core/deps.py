from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from sqlalchemy.orm import Session

from realty.core.config import get_settings
from realty.core.database import get_db
from realty.core.security import decode_token
from realty.models.admin import Admin

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


class AuthError(Exception):
    def __init__(self, status_code: int, detail: str):
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


def token_from_request(request: Request, bearer: str | None) -> str | None:
    # The admin panel relies on the cookie; API clients send a bearer header.
    return request.cookies.get(get_settings().AUTH_COOKIE_NAME) or bearer


def resolve_admin(db: Session, token: str | None) -> Admin:
    if not token:
        raise AuthError(status.HTTP_401_UNAUTHORIZED, "Access token required")
    try:
        payload = decode_token(token)
    except JWTError:
        raise AuthError(status.HTTP_403_FORBIDDEN, "Invalid or expired token")

    admin_id = payload.get("sub")
    if payload.get("typ") != "access" or not admin_id:
        raise AuthError(status.HTTP_403_FORBIDDEN, "Invalid or expired token")

    admin = db.get(Admin, admin_id)
    if admin is None:
        raise AuthError(status.HTTP_401_UNAUTHORIZED, "Invalid token")
    return admin


def get_current_admin(
    request: Request,
    db: Session = Depends(get_db),
    bearer: str | None = Depends(oauth2_scheme),
) -> Admin:
    try:
        return resolve_admin(db, token_from_request(request, bearer))
    except AuthError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.detail)
