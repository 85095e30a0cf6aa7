from datetime import datetime

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from structlog import get_logger

from realty.core.config import get_settings
from realty.core.security import get_password_hash, verify_password
from realty.models.admin import Admin

logger = get_logger()


def find_admin(db: Session, username: str) -> Admin | None:
    return db.scalar(select(Admin).where(Admin.username == username.strip().lower()))


def provision_admin(db: Session, username: str, password: str) -> Admin:
    admin = Admin(username=username.strip().lower(), hashed_password=get_password_hash(password))
    db.add(admin)
    db.commit()
    db.refresh(admin)
    logger.info("Provisioned admin account", username=admin.username)
    return admin


def authenticate(db: Session, username: str | None, password: str) -> Admin | None:
    """Check credentials and stamp ``last_login``.

    The admin row is created from ``ADMIN_USERNAME``/``ADMIN_PASSWORD`` the
    first time someone logs in with the configured username. Returns ``None``
    for an unknown username or a wrong password.
    """
    settings = get_settings()
    username = (username or settings.ADMIN_USERNAME).strip().lower()

    admin = find_admin(db, username)
    if admin is None:
        if username != settings.ADMIN_USERNAME.strip().lower():
            return None
        try:
            admin = provision_admin(db, username, settings.ADMIN_PASSWORD)
        except IntegrityError:
            # A concurrent first login created the row between the lookup and the insert.
            db.rollback()
            admin = find_admin(db, username)
            if admin is None:
                raise

    if not verify_password(password, admin.hashed_password):
        return None

    admin.last_login = datetime.utcnow()
    db.commit()
    db.refresh(admin)
    return admin
