"""Catalog queries and counter updates for property listings.

The list endpoint maps optional query parameters onto a SQLAlchemy
``select``: equality filters for the two enumerations, inclusive ranges for
price, area and investment return, and a case-insensitive substring search
over the text columns. Sorting always promotes featured listings when the
listing is ordered by a timestamp, and ``Property.id`` is the final tiebreak
so pages never overlap.
"""
from dataclasses import dataclass
import math

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.orm import Session

from realty.models.property import Property, PropertyType, TransactionType
from realty.schemas.property import PropertyCreate, PropertyUpdate
from realty.services.parsing import parse_optional_number

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
# Keeps OFFSET inside a signed 64-bit integer for every page size.
MAX_PAGE = (2**63 - 1) // MAX_PAGE_SIZE

SORT_FIELDS = {
    "createdAt": Property.created_at,
    "created_at": Property.created_at,
    "updatedAt": Property.updated_at,
    "updated_at": Property.updated_at,
    "price": Property.price,
    "area": Property.area,
    "views": Property.views,
}
FEATURED_SORT_KEYS = {"featured", "isFeatured"}
SEARCH_COLUMNS = (
    Property.title,
    Property.description,
    Property.short_description,
    Property.location,
    Property.address,
)
NULLABLE_UPDATE_FIELDS = {"investment_return", "layout"}


class FilterError(ValueError):
    pass


@dataclass
class PropertyFilters:
    type: PropertyType | None = None
    transaction_type: TransactionType | None = None
    min_price: float | None = None
    max_price: float | None = None
    min_area: float | None = None
    max_area: float | None = None
    min_investment_return: float | None = None
    max_investment_return: float | None = None
    search: str | None = None
    sort_by: str = "createdAt"
    sort_order: str = "desc"
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE

    @classmethod
    def from_query(cls, params: dict) -> "PropertyFilters":
        """Build filters from raw query values keyed by their wire (camelCase) names."""
        numbers = {}
        for wire_name, field_name in (
            ("minPrice", "min_price"),
            ("maxPrice", "max_price"),
            ("minArea", "min_area"),
            ("maxArea", "max_area"),
            ("minInvestmentReturn", "min_investment_return"),
            ("maxInvestmentReturn", "max_investment_return"),
        ):
            try:
                numbers[field_name] = parse_optional_number(params.get(wire_name))
            except ValueError:
                raise FilterError(f"Invalid number for {wire_name}")

        try:
            page = clamp_page(params.get("page"))
            limit = clamp_limit(params.get("limit"))
        except ValueError:
            raise FilterError("page and limit must be integers")

        search = (params.get("search") or "").strip() or None
        return cls(
            type=_enum_filter(PropertyType, params.get("type"), "type"),
            transaction_type=_enum_filter(TransactionType, params.get("transactionType"), "transactionType"),
            search=search,
            sort_by=params.get("sortBy") or "createdAt",
            sort_order=params.get("sortOrder") or "desc",
            page=page,
            limit=limit,
            **numbers,
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def _enum_filter(enum_cls, raw: str | None, wire_name: str):
    value = (raw or "").strip()
    if not value or value == "all":
        return None
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise FilterError(f"Invalid {wire_name}. Must be one of: {allowed}")


def clamp_page(page: int | str | None) -> int:
    if page is None or page == "":
        return 1
    return min(MAX_PAGE, max(1, int(page)))


def clamp_limit(limit: int | str | None) -> int:
    if limit is None or limit == "":
        return DEFAULT_PAGE_SIZE
    return min(MAX_PAGE_SIZE, max(1, int(limit)))


def build_conditions(filters: PropertyFilters) -> list:
    conditions = []
    if filters.type is not None:
        conditions.append(Property.type == filters.type)
    if filters.transaction_type is not None:
        conditions.append(Property.transaction_type == filters.transaction_type)

    for column, low, high in (
        (Property.price, filters.min_price, filters.max_price),
        (Property.area, filters.min_area, filters.max_area),
        (Property.investment_return, filters.min_investment_return, filters.max_investment_return),
    ):
        if low is not None:
            conditions.append(column >= low)
        if high is not None:
            conditions.append(column <= high)

    if filters.search:
        conditions.append(or_(*(col.icontains(filters.search, autoescape=True) for col in SEARCH_COLUMNS)))
    return conditions


def build_ordering(sort_by: str, sort_order: str) -> list:
    descending = sort_order != "asc"
    if sort_by in FEATURED_SORT_KEYS:
        return [Property.is_featured.desc(), Property.created_at.desc(), Property.id]

    column = SORT_FIELDS.get(sort_by, Property.created_at)
    ordered = column.desc() if descending else column.asc()
    if column is Property.created_at or column is Property.updated_at:
        return [Property.is_featured.desc(), ordered, Property.id]
    return [ordered, Property.id]


def list_properties(db: Session, filters: PropertyFilters) -> tuple[list[Property], dict]:
    conditions = build_conditions(filters)

    total = db.scalar(select(func.count()).select_from(Property).where(*conditions)) or 0
    stmt = (
        select(Property)
        .where(*conditions)
        .order_by(*build_ordering(filters.sort_by, filters.sort_order))
        .offset(filters.offset)
        .limit(filters.limit)
    )
    items = list(db.scalars(stmt).all())
    pagination = {
        "page": filters.page,
        "limit": filters.limit,
        "total": total,
        "pages": math.ceil(total / filters.limit),
    }
    return items, pagination


def get_property(db: Session, property_id: str) -> Property | None:
    return db.get(Property, property_id)


def create_property(db: Session, payload: PropertyCreate) -> Property:
    data = payload.model_dump(exclude={"coordinates", "specifications"})
    latitude, longitude = payload.coordinates
    prop = Property(
        **data,
        latitude=latitude,
        longitude=longitude,
        **payload.specifications.model_dump(),
    )
    db.add(prop)
    db.commit()
    db.refresh(prop)
    return prop


def apply_update(prop: Property, payload: PropertyUpdate) -> Property:
    """Copy the fields present in ``payload`` onto ``prop``.

    An explicit ``null`` clears the optional columns (investment return,
    layout, rooms, bathrooms) and is ignored for required ones.
    """
    changes = payload.model_dump(exclude_unset=True, exclude={"coordinates", "specifications"})
    for field, value in changes.items():
        if value is None and field not in NULLABLE_UPDATE_FIELDS:
            continue
        setattr(prop, field, value)

    if payload.coordinates is not None:
        prop.latitude, prop.longitude = payload.coordinates

    if payload.specifications is not None:
        for field, value in payload.specifications.model_dump(exclude_unset=True).items():
            if value is None and field not in ("rooms", "bathrooms"):
                continue
            setattr(prop, field, value)
    return prop


def update_property(db: Session, prop: Property, payload: PropertyUpdate) -> Property:
    apply_update(prop, payload)
    db.commit()
    db.refresh(prop)
    return prop


def delete_property(db: Session, property_id: str) -> bool:
    result = db.execute(delete(Property).where(Property.id == property_id))
    db.commit()
    return result.rowcount > 0


def toggle_featured(db: Session, prop: Property) -> Property:
    prop.is_featured = not prop.is_featured
    db.commit()
    db.refresh(prop)
    return prop


def _increment(db: Session, property_id: str, column_name: str) -> bool:
    column = getattr(Property, column_name)
    result = db.execute(
        update(Property)
        .where(Property.id == property_id)
        .values({column_name: column + 1, "updated_at": Property.updated_at})
        .execution_options(synchronize_session=False)
    )
    db.commit()
    return result.rowcount > 0


def record_view(db: Session, property_id: str) -> Property | None:
    """Count one view and return the listing with the new total."""
    if not _increment(db, property_id, "views"):
        return None
    return db.get(Property, property_id)


def record_submission(db: Session, property_id: str) -> int | None:
    if not _increment(db, property_id, "submissions"):
        return None
    return db.scalar(select(Property.submissions).where(Property.id == property_id))


def type_counts(db: Session) -> dict[str, int]:
    rows = db.execute(select(Property.type, func.count(Property.id)).group_by(Property.type)).all()
    return {row[0].value if isinstance(row[0], PropertyType) else str(row[0]): row[1] for row in rows}
