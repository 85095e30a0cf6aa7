from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session
from structlog import get_logger

from realty.core.database import get_db
from realty.core.deps import get_current_admin
from realty.models.admin import Admin
from realty.schemas.auth import MessageResponse
from realty.schemas.property import (
    PropertyCreate,
    PropertyListResponse,
    PropertyResponse,
    PropertyUpdate,
    SubmissionResponse,
)
from realty.services import catalog

logger = get_logger()

router = APIRouter(prefix="/properties", tags=["properties"])


def _get_or_404(db: Session, property_id: str):
    prop = catalog.get_property(db, property_id)
    if prop is None:
        raise HTTPException(status_code=404, detail="Property not found")
    return prop


@router.get("", response_model=PropertyListResponse)
def list_properties(request: Request, db: Session = Depends(get_db)):
    """Filter, search, sort and page the catalog.

    Query parameters use the frontend's camelCase names: ``type``,
    ``transactionType``, ``minPrice``/``maxPrice``, ``minArea``/``maxArea``,
    ``minInvestmentReturn``/``maxInvestmentReturn``, ``search``, ``sortBy``,
    ``sortOrder``, ``page`` and ``limit``.
    """
    try:
        filters = catalog.PropertyFilters.from_query(dict(request.query_params))
    except catalog.FilterError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    items, pagination = catalog.list_properties(db, filters)
    return {"properties": items, "pagination": pagination}


@router.post("", response_model=PropertyResponse, status_code=status.HTTP_201_CREATED)
def create_property(
    payload: PropertyCreate,
    db: Session = Depends(get_db),
    admin: Admin = Depends(get_current_admin),
):
    prop = catalog.create_property(db, payload)
    logger.info("Property created", property_id=prop.id, admin=admin.username)
    return prop


@router.get("/stats/types", response_model=dict[str, int])
def type_stats(db: Session = Depends(get_db)):
    return catalog.type_counts(db)


@router.get("/{property_id}", response_model=PropertyResponse)
def get_property(property_id: str, db: Session = Depends(get_db)):
    prop = catalog.record_view(db, property_id)
    if prop is None:
        raise HTTPException(status_code=404, detail="Property not found")
    return prop


@router.put("/{property_id}", response_model=PropertyResponse)
def update_property(
    property_id: str,
    payload: PropertyUpdate,
    db: Session = Depends(get_db),
    admin: Admin = Depends(get_current_admin),
):
    prop = _get_or_404(db, property_id)
    prop = catalog.update_property(db, prop, payload)
    logger.info(
        "Property updated",
        property_id=prop.id,
        admin=admin.username,
        fields=sorted(payload.model_fields_set),
    )
    return prop


@router.delete("/{property_id}", response_model=MessageResponse)
def delete_property(
    property_id: str,
    db: Session = Depends(get_db),
    admin: Admin = Depends(get_current_admin),
):
    if not catalog.delete_property(db, property_id):
        raise HTTPException(status_code=404, detail="Property not found")
    logger.info("Property deleted", property_id=property_id, admin=admin.username)
    return {"message": "Property deleted successfully"}


@router.patch("/{property_id}/featured", response_model=PropertyResponse)
def toggle_featured(
    property_id: str,
    db: Session = Depends(get_db),
    admin: Admin = Depends(get_current_admin),
):
    prop = catalog.toggle_featured(db, _get_or_404(db, property_id))
    logger.info("Property featured flag toggled", property_id=prop.id, featured=prop.is_featured, admin=admin.username)
    return prop


@router.post("/{property_id}/submit", response_model=SubmissionResponse)
def submit_form(property_id: str, db: Session = Depends(get_db)):
    count = catalog.record_submission(db, property_id)
    if count is None:
        raise HTTPException(status_code=404, detail="Property not found")
    return {"message": "Submission recorded", "form_submissions": count}
