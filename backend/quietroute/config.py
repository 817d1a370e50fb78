"""
Application configuration settings.
Reads from environment variables and .env file.
"""
import os
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def parse_cors_origins() -> list[str]:
    """
    Parse CORS_ORIGINS from environment variable.
    Supports comma-separated string format for deployment.
    Falls back to local development origins.
    """
    cors_env = os.environ.get("CORS_ORIGINS", "")
    if cors_env:
        # Parse comma-separated origins
        return [origin.strip() for origin in cors_env.split(",") if origin.strip()]
    return [
        "http://localhost:3000",
        "http://localhost:5173",
    ]


class Settings(BaseSettings):
    """Application settings."""

    # API
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "QuietRoute"

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # CORS - parsed from environment variable
    CORS_ORIGINS: list[str] = parse_cors_origins()

    # Redis (route response cache)
    REDIS_URL: str = "redis://localhost:6379/0"
    CACHE_REDIS_URL: Optional[str] = None
    ROUTE_CACHE_TTL_SECONDS: int = 15 * 60

    # Routing oracle (OSRM); primary first, then fallback
    OSRM_SERVER_URL: str = "https://router.project-osrm.org"
    OSRM_FALLBACK_SERVER_URL: Optional[str] = "http://localhost:5000"
    OSRM_PROFILE: str = "foot"
    OSRM_ALTERNATIVES: int = 3
    OSRM_TIMEOUT_SECONDS: float = 10.0

    # Geocoder (Nominatim)
    NOMINATIM_URL: str = "https://nominatim.openstreetmap.org"
    GEOCODER_USER_AGENT: str = "QuietRoute/1.0"
    GEOCODER_TIMEOUT_SECONDS: float = 5.0
    # "west,south,east,north"; results inside are preferred, not required
    GEOCODER_VIEWBOX: Optional[str] = None

    # Scoring
    USE_VECTORIZED_SCORING: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
    )

    @property
    def cache_redis_url(self) -> str:
        """Redis URL for application cache operations."""
        return self.CACHE_REDIS_URL or self.REDIS_URL

    @property
    def osrm_servers(self) -> list[str]:
        """OSRM servers in the order they should be tried."""
        servers = [self.OSRM_SERVER_URL]
        if self.OSRM_FALLBACK_SERVER_URL and self.OSRM_FALLBACK_SERVER_URL != self.OSRM_SERVER_URL:
            servers.append(self.OSRM_FALLBACK_SERVER_URL)
        return [server.rstrip("/") for server in servers]


# Global settings instance
settings = Settings()
