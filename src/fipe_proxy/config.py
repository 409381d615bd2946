import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("PORT", "3456"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    # Upstream FIPE
    fipe_api_url: str = os.getenv("FIPE_API_URL", "https://veiculos.fipe.org.br/api/veiculos")
    fipe_timeout: float = float(os.getenv("FIPE_TIMEOUT", "30"))

    # Cache
    cache_ttl: int = int(os.getenv("CACHE_TTL", "3600"))  # 1 hour

    # Inbound rate limit (per client IP)
    rate_limit_max_requests: int = int(os.getenv("RATE_LIMIT_MAX_REQUESTS", "10000"))
    rate_limit_window_seconds: int = int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "900"))  # 15 minutes

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_ttl <= 0:
            raise ValueError("CACHE_TTL must be a positive number of seconds")

        if self.fipe_timeout <= 0:
            raise ValueError("FIPE_TIMEOUT must be a positive number of seconds")

        if self.rate_limit_max_requests <= 0 or self.rate_limit_window_seconds <= 0:
            raise ValueError(
                "RATE_LIMIT_MAX_REQUESTS and RATE_LIMIT_WINDOW_SECONDS must be positive, "
                f"got {self.rate_limit_max_requests} / {self.rate_limit_window_seconds}"
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
