"""
Configuration management for VidScrape application.
"""
import os
from typing import List, Optional


def _optional_float(value: Optional[str]) -> Optional[float]:
    """Parse an optional float setting; empty means unset."""
    if value is None or not value.strip():
        return None
    return float(value)


class Settings:
    """Application settings with environment variable support."""

    # Scrape service configuration
    scrape_service_url: str = os.getenv("SCRAPE_SERVICE_URL", "http://localhost:5000/scrape")
    scrape_service_timeout: Optional[float] = _optional_float(os.getenv("SCRAPE_SERVICE_TIMEOUT"))  # None = wait forever

    # API server configuration
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    cors_allow_origins: List[str] = [
        origin.strip() for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if origin.strip()
    ]

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Application settings
    environment: str = os.getenv("ENVIRONMENT", "development")
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"

    def __init__(self):
        """Initialize settings from environment variables."""
        pass


# Global settings instance
settings = Settings()
