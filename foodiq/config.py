"""Configuration management for FoodIQ using Pydantic."""

import logging
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Data Provider Configuration
    data_provider: Literal["mock", "yelp"] = Field(
        default="mock", description="Restaurant data source: mock or yelp"
    )

    # Yelp Fusion Configuration
    yelp_api_key: str | None = Field(None, description="Yelp Fusion API key")
    yelp_api_base_url: str = Field(
        default="https://api.yelp.com/v3", description="Yelp Fusion API base URL"
    )
    request_timeout: float | None = Field(
        None, description="Timeout in seconds for provider requests (None = no timeout)"
    )

    # Search Configuration
    default_location: str = Field(
        default="New York", description="Location used when none is given"
    )
    default_limit: int = Field(default=20, ge=0, description="Default result limit")

    # Mock Provider Configuration
    mock_search_delay: float = Field(
        default=0.6, ge=0, description="Simulated latency for mock searches (seconds)"
    )
    mock_detail_delay: float = Field(
        default=0.4, ge=0, description="Simulated latency for mock lookups (seconds)"
    )

    # Server Configuration
    server_host: str = Field(default="0.0.0.0", description="Server host")
    server_port: int = Field(default=8080, description="Server port")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")

    def has_yelp_config(self) -> bool:
        """Check if the Yelp credential is set."""
        return bool(self.yelp_api_key)

    def model_post_init(self, __context) -> None:
        """Validate configuration after initialization."""
        if self.data_provider == "yelp" and not self.yelp_api_key:
            logger.warning("YELP_API_KEY not set - Yelp searches will fail")


# Global config instance
config: Config | None = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global config
    if config is None:
        config = Config()
    return config


def setup_logging(cfg: Config | None = None) -> None:
    """Configure logging for the application."""
    if cfg is None:
        cfg = get_config()

    log_level = getattr(logging, cfg.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Reduce noise from external libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
