import time
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy.exc import OperationalError, ProgrammingError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from structlog import get_logger

from realty.api.api import api_router
from realty.core.config import get_settings
from realty.core.database import engine, init_db
from realty.core.logging import configure_logging
from realty.core.middleware import RequestIDMiddleware, SecurityHeadersMiddleware
from realty.core.rate_limit import limiter
from realty.services import maintenance

settings = get_settings()
logger = get_logger()
started_at = time.monotonic()

MISSING_TABLE_MARKERS = ("no such table", "doesn't exist", "does not exist", "undefined table")

app = FastAPI(
    title=settings.PROJECT_NAME,
    docs_url="/docs" if settings.ENABLE_API_DOCS else None,
    redoc_url="/redoc" if settings.ENABLE_API_DOCS else None,
    openapi_url="/openapi.json" if settings.ENABLE_API_DOCS else None,
)
app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)
app.add_middleware(RequestIDMiddleware)
app.add_middleware(SecurityHeadersMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    # The admin session travels in an HttpOnly cookie.
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "x-request-id"],
)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@app.on_event("startup")
def on_startup() -> None:
    configure_logging()
    try:
        init_db()
    except SQLAlchemyError as exc:
        # Keep serving so /api/readiness and /api/admin/* can report the problem.
        logger.error("Database initialization failed", error=str(exc))
    logger.info("Service started", environment=settings.ENVIRONMENT)


@app.get(f"{settings.API_PREFIX}/health")
@limiter.limit("60/minute")
def health(request: Request):
    return {
        "status": "ok",
        "timestamp": _timestamp(),
        "uptime": round(time.monotonic() - started_at, 3),
    }


@app.get(f"{settings.API_PREFIX}/readiness")
def readiness():
    ready, body = maintenance.readiness(engine)
    body["timestamp"] = _timestamp()
    if ready:
        body["uptime"] = round(time.monotonic() - started_at, 3)
    return JSONResponse(status_code=200 if ready else 503, content=body)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404 and exc.detail == "Not Found":
        return JSONResponse(status_code=404, content={"message": "Route not found"})
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"message": "Validation error", "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(status_code=429, content={"message": f"Too many requests: {exc.detail}"})


@app.exception_handler(OperationalError)
@app.exception_handler(ProgrammingError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    reason = str(getattr(exc, "orig", None) or exc).lower()
    if any(marker in reason for marker in MISSING_TABLE_MARKERS):
        logger.warning("Database not initialized", path=request.url.path)
        return JSONResponse(
            status_code=503,
            content={"message": "Database not initialized. Please call POST /api/admin/init first."},
        )
    logger.error("Database error", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=503,
        content={"message": "Database connection failed. Please try again later."},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error", path=request.url.path)
    return JSONResponse(status_code=500, content={"message": "Server error"})


app.include_router(api_router, prefix=settings.API_PREFIX)
