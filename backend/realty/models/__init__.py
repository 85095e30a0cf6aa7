from realty.models.admin import Admin
from realty.models.property import Property, PropertyType, TransactionType

__all__ = [
    "Admin",
    "Property",
    "PropertyType",
    "TransactionType",
]
