import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")
    estate_key_prefix: str = os.getenv("ESTATE_KEY_PREFIX", "estate")

    # Search
    nazotte_limit: int = int(os.getenv("NAZOTTE_LIMIT", "50"))
    low_priced_limit: int = int(os.getenv("LOW_PRICED_LIMIT", "20"))

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "1323"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    # Logging
    app_env: str = os.getenv("APP_ENV", "development")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def is_development(self) -> bool:
        """Check if the service runs with human-readable console logs."""
        return self.app_env.lower() == "development"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.nazotte_limit < 0:
            raise ValueError(f"NAZOTTE_LIMIT must be >= 0, got {self.nazotte_limit}")

        if self.low_priced_limit < 0:
            raise ValueError(f"LOW_PRICED_LIMIT must be >= 0, got {self.low_priced_limit}")

        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {list(_LOG_LEVELS)}, got {self.log_level}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> redis.Redis:
    """Create a Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=True,
    )
