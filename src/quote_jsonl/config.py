import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import httpx
from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = "[%(levelname)s][%(asctime)s][%(filename)s:%(lineno)d] - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# quotable rejects larger pages
MAX_QUOTE_LIMIT = 150


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Upstream quote API
    quote_api_base_url: str = os.getenv("QUOTE_API_BASE_URL", "https://api.quotable.io")
    quote_api_limit: int = int(os.getenv("QUOTE_API_LIMIT", "10"))

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not 1 <= self.quote_api_limit <= MAX_QUOTE_LIMIT:
            raise ValueError(
                f"QUOTE_API_LIMIT must be between 1 and {MAX_QUOTE_LIMIT}, "
                f"got {self.quote_api_limit}"
            )

        if self.log_level not in logging.getLevelNamesMapping():
            raise ValueError(f"LOG_LEVEL is not a known level: {self.log_level}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_quote_api_client() -> httpx.Client:
    """Create an HTTP client bound to the upstream quote API."""
    return httpx.Client(base_url=settings.quote_api_base_url)


def configure_logging(level: str | None = None) -> None:
    """Install the root log handler used by the service.

    Args:
        level: Log level name. Defaults to settings.log_level.
    """
    logging.basicConfig(
        level=level or settings.log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
