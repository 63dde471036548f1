"""Application configuration using Pydantic Settings."""

from typing import Annotated, Any, List, Optional
from urllib.parse import quote_plus

from pydantic import AliasChoices, BeforeValidator, Field
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


def parse_list_of_strings(v: Any) -> List[str]:
    """Parse comma-separated string to list of strings."""
    if isinstance(v, str):
        return [x.strip() for x in v.split(",") if x.strip()]
    if isinstance(v, list):
        return v
    return [v]


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    APP_NAME: str = "JobSpark API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = Field(
        default="development",
        validation_alias=AliasChoices("ENVIRONMENT", "NODE_ENV"),
    )

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # MongoDB (credentials in .env)
    MONGODB_URL: Optional[str] = None  # Full connection string, wins over the parts below
    MONGODB_USERNAME: str = Field(
        default="", validation_alias=AliasChoices("MONGODB_USERNAME", "DB_USER")
    )
    MONGODB_PASSWORD: str = Field(
        default="", validation_alias=AliasChoices("MONGODB_PASSWORD", "DB_KEY")
    )
    MONGODB_CLUSTER: str = "cluster0.pb8np.mongodb.net"
    MONGODB_APP_NAME: str = "Cluster0"
    MONGODB_DATABASE: str = "JobSpark"
    MONGODB_USERS_COLLECTION: str = "users"
    MONGODB_MAX_POOL_SIZE: int = 10
    MONGODB_MIN_POOL_SIZE: int = 0
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = 5000
    STORAGE_TYPE: str = "mongodb"  # "mongodb" or "memory"

    # JWT
    SECRET_KEY: str = Field(
        default="change-this-secret-key-in-production",
        validation_alias=AliasChoices("SECRET_KEY", "JWT_SECRET"),
    )
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60  # 1 hour
    AUTH_COOKIE_NAME: str = "token"

    # CORS
    CORS_ORIGINS: Annotated[List[str], NoDecode, BeforeValidator(parse_list_of_strings)] = [
        "http://localhost:5173"
    ]

    # Pagination
    MAX_PAGE_SIZE: int = 100

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    # Monitoring
    SENTRY_DSN: str = ""
    SENTRY_ENVIRONMENT: str = "production"
    SENTRY_TRACES_SAMPLE_RATE: float = 0.1

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    @property
    def COOKIE_SECURE(self) -> bool:
        return self.is_production

    @property
    def COOKIE_SAMESITE(self) -> str:
        # Cross-site cookies need SameSite=None, which browsers only accept with Secure
        return "none" if self.is_production else "strict"

    @property
    def MONGODB_URI(self) -> str:
        """Construct MongoDB connection URI"""
        if self.MONGODB_URL:
            return self.MONGODB_URL
        query = f"?retryWrites=true&w=majority&appName={self.MONGODB_APP_NAME}"
        if self.MONGODB_USERNAME and self.MONGODB_PASSWORD:
            username = quote_plus(self.MONGODB_USERNAME)
            password = quote_plus(self.MONGODB_PASSWORD)
            return f"mongodb+srv://{username}:{password}@{self.MONGODB_CLUSTER}/{query}"
        return f"mongodb+srv://{self.MONGODB_CLUSTER}/{query}"


# Create global settings instance
settings = Settings()
