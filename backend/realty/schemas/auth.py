from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from realty.schemas.common import utc_isoformat


class LoginRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    username: str | None = None
    password: str = Field(min_length=1)
    remember_me: bool = False


class AdminInfo(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str
    username: str
    last_login: datetime | None = None

    @field_serializer("last_login")
    def serialize_last_login(self, value: datetime | None) -> str | None:
        return utc_isoformat(value) if value is not None else None


class LoginResponse(BaseModel):
    message: str
    token: str
    admin: AdminInfo


class AuthCheckResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str
    is_authenticated: bool
    admin: AdminInfo | None = None


class MessageResponse(BaseModel):
    message: str
