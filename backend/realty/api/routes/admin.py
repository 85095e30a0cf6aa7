from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from structlog import get_logger

from realty.core.database import engine, get_db
from realty.core.deps import get_current_admin
from realty.models.admin import Admin
from realty.schemas.admin import RecreateTablesRequest
from realty.services import maintenance

logger = get_logger()

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/init")
def init_database():
    # Public: on a fresh database there is no admin table to authenticate against.
    created = maintenance.init_tables(engine)
    return {
        "success": True,
        "message": "Database initialized successfully",
        "created": created,
    }


@router.get("/check-db")
def check_db(admin: Admin = Depends(get_current_admin)):
    table_exists, report = maintenance.check_db(engine)
    if not table_exists:
        return JSONResponse(status_code=404, content=report)
    return report


@router.post("/recreate-tables")
def recreate_tables(
    payload: RecreateTablesRequest,
    db: Session = Depends(get_db),
    admin: Admin = Depends(get_current_admin),
):
    if not payload.confirm_delete:
        raise HTTPException(
            status_code=400,
            detail='This will delete all data. Send {"confirmDelete": true} to confirm.',
        )
    username = admin.username
    # Release the request session before dropping the table it read the admin from.
    db.close()
    tables = maintenance.recreate_tables(engine)
    logger.warning("Tables recreated by admin", admin=username)
    return {
        "success": True,
        "message": "Tables recreated successfully. All data was deleted.",
        "tables": tables,
    }


@router.get("/test-db-connection")
def test_db_connection(admin: Admin = Depends(get_current_admin)):
    success, report = maintenance.connection_report(engine)
    return JSONResponse(status_code=200 if success else 503, content=report)
