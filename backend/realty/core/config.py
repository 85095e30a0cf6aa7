from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Ignore unknown env vars so the frontend and backend can share one .env file.
    model_config = SettingsConfigDict(env_file=(".env", "../.env"), case_sensitive=True, extra="ignore")

    PROJECT_NAME: str = "Realty Catalog"
    ENVIRONMENT: str = "development"
    API_PREFIX: str = "/api"

    DATABASE_URL: str = "sqlite:///./realty.db"
    DB_POOL_SIZE: int = 10
    DB_CONNECT_TIMEOUT: int = 10

    SECRET_KEY: str = "change_me"
    JWT_ALGORITHM: str = "HS512"
    JWT_ISSUER: str = "realty-catalog"
    JWT_AUDIENCE: str = "realty-catalog-admin"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7

    AUTH_COOKIE_NAME: str = "adminToken"
    REMEMBER_ME_MAX_AGE_DAYS: int = 7
    SESSION_MAX_AGE_DAYS: int = 1

    # Credentials used to provision the admin record on the first login attempt.
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "password"

    BACKEND_CORS_ORIGINS: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])
    ENABLE_API_DOCS: bool = True

    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_DEFAULT: str = "100/15minutes"
    LOGIN_RATE_LIMIT: str = "20/minute"

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    S3_ENDPOINT: str = ""
    S3_REGION: str = "ru-1"
    S3_BUCKET_NAME: str = ""
    S3_ACCESS_KEY: str = ""
    S3_SECRET_KEY: str = ""
    UPLOAD_MAX_BYTES: int = 10 * 1024 * 1024
    UPLOAD_URL_TTL_SECONDS: int = 3600

    @model_validator(mode="after")
    def _prod_guards(self):
        if self.is_production:
            if not self.SECRET_KEY or len(self.SECRET_KEY) < 32:
                raise ValueError("SECRET_KEY must be 32+ chars in production")
            if self.ADMIN_PASSWORD in ("", "password"):
                raise ValueError("ADMIN_PASSWORD must be set in production")
            self.LOG_JSON = True
        return self

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        return self.DATABASE_URL

    def missing_required(self) -> list[str]:
        """Names of settings that must be set before the service can take traffic."""
        required = {
            "DATABASE_URL": self.DATABASE_URL,
            "SECRET_KEY": self.SECRET_KEY,
            "ADMIN_PASSWORD": self.ADMIN_PASSWORD,
            "S3_ENDPOINT": self.S3_ENDPOINT,
            "S3_BUCKET_NAME": self.S3_BUCKET_NAME,
            "S3_ACCESS_KEY": self.S3_ACCESS_KEY,
            "S3_SECRET_KEY": self.S3_SECRET_KEY,
        }
        return [name for name, value in required.items() if not value]


@lru_cache
def get_settings() -> Settings:
    return Settings()
