from sqlalchemy import func, select

from realty.core.config import get_settings
from realty.core.database import SessionLocal, init_db
from realty.models.property import Property
from realty.schemas.property import PropertyCreate
from realty.seed_data import SAMPLE_PROPERTIES
from realty.services import catalog
from realty.services.admins import find_admin, provision_admin


def ensure_admin(username: str, password: str) -> None:
    db = SessionLocal()
    try:
        if find_admin(db, username):
            print(f"Admin already exists: {username}")
            return
        provision_admin(db, username, password)
        print(f"Created admin: {username}")
    finally:
        db.close()


def seed_properties() -> int:
    db = SessionLocal()
    try:
        existing = db.scalar(select(func.count()).select_from(Property))
        if existing:
            print(f"Seed skipped: {existing} properties already present")
            return 0
        for raw in SAMPLE_PROPERTIES:
            catalog.create_property(db, PropertyCreate.model_validate(raw))
        print(f"Inserted {len(SAMPLE_PROPERTIES)} properties")
        return len(SAMPLE_PROPERTIES)
    finally:
        db.close()


def main() -> None:
    settings = get_settings()
    init_db()
    ensure_admin(settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD)
    seed_properties()


if __name__ == "__main__":
    main()
