from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from realty.models.property import PropertyType, TransactionType
from realty.schemas.common import utc_isoformat
from realty.services.parsing import parse_investment_return


class Specifications(BaseModel):
    rooms: int | None = Field(default=None, ge=0)
    bathrooms: int | None = Field(default=None, ge=0)
    parking: bool = False
    balcony: bool = False
    elevator: bool = False
    furnished: bool = False


class SpecificationsUpdate(BaseModel):
    rooms: int | None = Field(default=None, ge=0)
    bathrooms: int | None = Field(default=None, ge=0)
    parking: bool | None = None
    balcony: bool | None = None
    elevator: bool | None = None
    furnished: bool | None = None


class _PropertyPayload(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        allow_inf_nan=False,
    )

    @field_validator("coordinates", check_fields=False)
    @classmethod
    def check_coordinates(cls, value):
        if value is None:
            return value
        lat, lng = value
        if not -90 <= lat <= 90 or not -180 <= lng <= 180:
            raise ValueError("Coordinates must be [latitude, longitude] with valid ranges")
        return value

    @field_validator("type", "transaction_type", mode="before", check_fields=False)
    @classmethod
    def strip_enum_text(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("investment_return", mode="before", check_fields=False)
    @classmethod
    def coerce_investment_return(cls, value):
        return parse_investment_return(value)


class PropertyCreate(_PropertyPayload):
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=2000)
    short_description: str = Field(min_length=1, max_length=300)
    price: float = Field(ge=0)
    area: float = Field(ge=0)
    location: str = Field(min_length=1, max_length=255)
    address: str = Field(min_length=1, max_length=500)
    coordinates: tuple[float, float]
    type: PropertyType
    transaction_type: TransactionType
    investment_return: float | None = Field(default=None, ge=0, le=100)
    images: list[str]
    is_featured: bool = False
    layout: str | None = Field(default=None, max_length=500)
    specifications: Specifications = Field(default_factory=Specifications)


class PropertyUpdate(_PropertyPayload):
    """Partial update. Fields left out of the body keep their stored values."""

    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, min_length=1, max_length=2000)
    short_description: str | None = Field(default=None, min_length=1, max_length=300)
    price: float | None = Field(default=None, ge=0)
    area: float | None = Field(default=None, ge=0)
    location: str | None = Field(default=None, min_length=1, max_length=255)
    address: str | None = Field(default=None, min_length=1, max_length=500)
    coordinates: tuple[float, float] | None = None
    type: PropertyType | None = None
    transaction_type: TransactionType | None = None
    investment_return: float | None = Field(default=None, ge=0, le=100)
    images: list[str] | None = None
    is_featured: bool | None = None
    layout: str | None = Field(default=None, max_length=500)
    specifications: SpecificationsUpdate | None = None


class PropertyResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str = Field(alias="_id")
    title: str
    description: str
    short_description: str
    price: float
    area: float
    location: str
    address: str
    coordinates: list[float]
    type: PropertyType
    transaction_type: TransactionType
    investment_return: float | None
    images: list[str]
    is_featured: bool
    layout: str | None
    specifications: Specifications
    views: int
    form_submissions: int
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def serialize_timestamp(self, value: datetime) -> str:
        return utc_isoformat(value)


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class PropertyListResponse(BaseModel):
    properties: list[PropertyResponse]
    pagination: Pagination


class SubmissionResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str
    form_submissions: int
