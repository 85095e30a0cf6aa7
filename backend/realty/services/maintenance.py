"""Database diagnostics and schema management for the admin console.

Everything here goes through SQLAlchemy's inspector so the same checks work
on MySQL, PostgreSQL and SQLite.
"""
from sqlalchemy import func, inspect, select, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from structlog import get_logger

from realty.core.config import get_settings
from realty.core.database import Base
from realty.models.admin import Admin
from realty.models.property import Property

logger = get_logger()

PROPERTIES_TABLE = Property.__tablename__
ENUM_COLUMNS = ("type", "transaction_type")


def _register_models() -> None:
    from realty import models  # noqa: F401


def init_tables(engine: Engine) -> list[str]:
    """Create missing tables and return the names that were created."""
    _register_models()
    before = set(inspect(engine).get_table_names())
    Base.metadata.create_all(bind=engine)
    created = sorted(set(inspect(engine).get_table_names()) - before)
    logger.info("Initialized database", created=created)
    return created


def recreate_tables(engine: Engine) -> list[str]:
    _register_models()
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    tables = sorted(Base.metadata.tables)
    logger.warning("Dropped and recreated all tables", tables=tables)
    return tables


def ping(engine: Engine) -> None:
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))


def _recommendations(checks: dict) -> list[str]:
    recommendations = []
    if not checks["connection"]:
        recommendations.append("Fix database connection configuration")
    if not checks["tableExists"]:
        recommendations.append("Initialize database by calling POST /api/admin/init")
    for name, info in (("type", checks["typeColumn"]), ("transaction_type", checks["transactionTypeColumn"])):
        if info is not None and "CHAR" not in info["type"].upper():
            recommendations.append(
                f"Column {name} should be VARCHAR(50) to hold the Cyrillic enumeration values. "
                "Consider recreating the table."
            )
    if not recommendations:
        recommendations.append("Database structure looks correct")
    return recommendations


def check_db(engine: Engine) -> tuple[bool, dict]:
    """Inspect the properties table.

    Returns ``(table_exists, report)``. A failed connection propagates as
    ``SQLAlchemyError`` so the caller can map it to 503.
    """
    ping(engine)
    checks = {
        "connection": True,
        "tableExists": False,
        "dialect": engine.dialect.name,
        "typeColumn": None,
        "transactionTypeColumn": None,
        "counts": {},
        "sampleData": [],
    }

    inspector = inspect(engine)
    tables = inspector.get_table_names()
    checks["tableExists"] = PROPERTIES_TABLE in tables
    if not checks["tableExists"]:
        return False, {
            "success": False,
            "message": "Properties table does not exist. Please initialize database.",
            "checks": checks,
            "recommendations": _recommendations(checks),
        }

    for column in inspector.get_columns(PROPERTIES_TABLE):
        if column["name"] in ENUM_COLUMNS:
            key = "typeColumn" if column["name"] == "type" else "transactionTypeColumn"
            checks[key] = {"type": str(column["type"]), "nullable": column["nullable"]}

    with engine.connect() as conn:
        checks["counts"][PROPERTIES_TABLE] = conn.scalar(select(func.count()).select_from(Property.__table__))
        if Admin.__tablename__ in tables:
            checks["counts"][Admin.__tablename__] = conn.scalar(select(func.count()).select_from(Admin.__table__))
        rows = conn.execute(
            select(Property.__table__.c.id, Property.__table__.c.type, Property.__table__.c.transaction_type).limit(5)
        ).all()
    checks["sampleData"] = [
        {
            "id": row.id,
            "type": getattr(row.type, "value", row.type),
            "transactionType": getattr(row.transaction_type, "value", row.transaction_type),
        }
        for row in rows
    ]

    return True, {
        "success": True,
        "message": "Database structure check completed",
        "checks": checks,
        "recommendations": _recommendations(checks),
    }


def masked_config(engine: Engine) -> dict:
    url = engine.url
    return {
        "url": url.render_as_string(hide_password=True),
        "driver": url.drivername,
        "host": url.host or "not set",
        "port": url.port,
        "user": url.username or "not set",
        "password": "***set***" if url.password else "not set",
        "database": url.database or "not set",
    }


def connection_report(engine: Engine) -> tuple[bool, dict]:
    diagnostics = {
        "config": masked_config(engine),
        "connection": {"success": False, "error": None, "details": {}},
        "serverInfo": None,
    }
    try:
        with engine.connect() as conn:
            test = conn.scalar(text("SELECT 1"))
            diagnostics["connection"]["details"]["testQuery"] = "OK" if test == 1 else "Failed"
        inspector = inspect(engine)
        diagnostics["connection"]["success"] = True
        diagnostics["connection"]["details"]["tables"] = inspector.get_table_names()
        version = engine.dialect.server_version_info
        diagnostics["serverInfo"] = {
            "dialect": engine.dialect.name,
            "driver": engine.dialect.driver,
            "version": ".".join(str(part) for part in version) if version else None,
        }
    except SQLAlchemyError as exc:
        logger.warning("Database connection test failed", error=str(exc))
        diagnostics["connection"]["error"] = {
            "type": type(exc).__name__,
            "message": str(getattr(exc, "orig", None) or exc),
        }

    success = diagnostics["connection"]["success"]
    recommendations = []
    if not success:
        recommendations.append("Verify DATABASE_URL host, port and credentials and that the server is reachable.")
    elif engine.dialect.name == "sqlite" and get_settings().is_production:
        recommendations.append("SQLite is intended for local development. Use MySQL or PostgreSQL in production.")
    if not recommendations:
        recommendations.append("Database connection is properly configured.")

    return success, {
        "success": success,
        "message": "Database connection successful" if success else "Database connection failed",
        "diagnostics": diagnostics,
        "recommendations": recommendations,
    }


def readiness(engine: Engine) -> tuple[bool, dict]:
    try:
        ping(engine)
    except SQLAlchemyError as exc:
        logger.warning("Readiness check failed", error=str(exc))
        return False, {"status": "not ready", "reason": "Database connection failed", "error": str(exc)}

    missing = get_settings().missing_required()
    if missing:
        return False, {"status": "not ready", "reason": "Missing environment variables", "missing": missing}
    return True, {"status": "ready", "checks": {"database": "ok", "environment": "ok"}}
