# cpqsync/core/config.py

import os
from functools import lru_cache
from typing import Optional
from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings.
    Loads values from environment variables (.env file)
    """
    # Shopify Admin REST API (source catalog)
    SHOPIFY_STORE_URL: str = ""
    SHOPIFY_ADMIN_TOKEN: str = ""
    SHOPIFY_API_VERSION: str = "2024-07"
    SHOPIFY_PRODUCT_LIMIT: int = 250  # Single page, Shopify's max for REST

    # XaitCPQ (target part catalog)
    XAIT_API_URL: str = ""
    XAIT_USERNAME: str = ""
    XAIT_PASSWORD: str = ""
    XAIT_PART_LIST_VIEW_ID: Optional[str] = None  # Without it lookups always miss
    XAIT_REFERER: Optional[str] = None
    XAIT_UPDATE_EXISTING: bool = False

    # Scheduling
    SYNC_SCHEDULE: str = "*/5 * * * *"
    SYNC_SCHEDULE_ENABLED: bool = True

    # Outbound HTTP
    HTTP_TIMEOUT: float = 30.0

    # Server
    PORT: int = 3000

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = ConfigDict(
        env_file=os.environ.get('ENV_FILE', '.env') if os.path.exists('.env') else None,
        case_sensitive=True,
        extra="ignore"
    )


@lru_cache()
def get_settings():
    """Cached settings to avoid loading .env file for every request"""
    return Settings()

def clear_settings_cache():
    """Clear the settings cache - useful when switching between environments"""
    get_settings.cache_clear()
