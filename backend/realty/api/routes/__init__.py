from realty.api.routes import admin, auth, properties, upload

__all__ = [
    "auth",
    "properties",
    "upload",
    "admin",
]
