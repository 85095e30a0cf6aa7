from datetime import datetime
import enum
import uuid

from sqlalchemy import JSON, Boolean, DateTime, Enum, Float, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from realty.core.database import Base


class PropertyType(str, enum.Enum):
    residential = "Жилые помещения"
    commercial = "Нежилые помещения"
    parking_space = "Машино-места"
    garage = "Гараж-боксы"


class TransactionType(str, enum.Enum):
    sale = "Продажа"
    rent = "Аренда"


def _new_id() -> str:
    return str(uuid.uuid4())


class Property(Base):
    __tablename__ = "properties"
    __table_args__ = (
        Index("idx_properties_featured_created", "is_featured", "created_at"),
        Index("idx_properties_location", "latitude", "longitude"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    short_description: Mapped[str] = mapped_column(String(300), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False, index=True)
    area: Mapped[float] = mapped_column(Float, nullable=False, index=True)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(String(500), nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    type: Mapped[PropertyType] = mapped_column(
        Enum(PropertyType, values_callable=lambda e: [m.value for m in e], native_enum=False, length=50),
        nullable=False,
        index=True,
    )
    transaction_type: Mapped[TransactionType] = mapped_column(
        Enum(TransactionType, values_callable=lambda e: [m.value for m in e], native_enum=False, length=50),
        nullable=False,
        index=True,
    )
    investment_return: Mapped[float | None] = mapped_column(Float)
    images: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    is_featured: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    layout: Mapped[str | None] = mapped_column(String(500))

    rooms: Mapped[int | None] = mapped_column(Integer)
    bathrooms: Mapped[int | None] = mapped_column(Integer)
    parking: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    balcony: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    elevator: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    furnished: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    views: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    submissions: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    @property
    def coordinates(self) -> list[float]:
        return [self.latitude, self.longitude]

    @property
    def specifications(self) -> dict:
        return {
            "rooms": self.rooms,
            "bathrooms": self.bathrooms,
            "parking": self.parking,
            "balcony": self.balcony,
            "elevator": self.elevator,
            "furnished": self.furnished,
        }

    @property
    def form_submissions(self) -> int:
        return self.submissions
