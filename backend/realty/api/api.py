from fastapi import APIRouter

from realty.api.routes import admin, auth, properties, upload

api_router = APIRouter()
api_router.include_router(auth.router)
api_router.include_router(properties.router)
api_router.include_router(upload.router)
api_router.include_router(admin.router)
