"""
Database engine and session management.

The engine is built from ``Settings.DATABASE_URL``. SQLite URLs get the
thread-sharing connect args FastAPI's threadpool needs, and in-memory SQLite
uses a ``StaticPool`` so every session sees the same schema.
"""
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import StaticPool

from realty.core.config import get_settings


class Base(DeclarativeBase):
    pass


def _engine_kwargs(url: str) -> dict:
    settings = get_settings()
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if parsed.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        return kwargs
    connect_args = {"connect_timeout": settings.DB_CONNECT_TIMEOUT}
    return {
        "pool_size": settings.DB_POOL_SIZE,
        "pool_pre_ping": True,
        "connect_args": connect_args,
    }


def build_engine(url: str):
    return create_engine(url, **_engine_kwargs(url))


engine = build_engine(get_settings().SQLALCHEMY_DATABASE_URI)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """FastAPI dependency yielding a session that is always closed."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    # Imported for the side effect of registering tables on Base.metadata.
    from realty import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
