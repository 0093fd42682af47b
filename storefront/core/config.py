"""
Application configuration management using Pydantic Settings
Handles environment variables for the storefront service
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
from functools import lru_cache


class Settings(BaseSettings):
    """Main application settings"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Application Settings
    APP_NAME: str = "Storefront API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Server Settings
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Database Configuration (backs the profile key-value store)
    DATABASE_URL: str = "sqlite:///./storefront.db"
    DATABASE_ECHO: bool = False

    # CORS Configuration
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # Profile storage
    PROFILE_STORAGE_KEY: str = "user_profile"

    # Catalog source simulation
    CATALOG_LOAD_DELAY: float = 0.5
    CATALOG_FAILURE_RATE: float = 0.1

    # Checkout
    CHECKOUT_DELAY: float = 2.0
    ORDER_NUMBER_PREFIX: str = "ORD"
    REJECT_OUT_OF_STOCK_CHECKOUT: bool = True

    # Business Logic Settings
    MAX_ITEM_QUANTITY: int = 999
    CURRENCY: str = "USD"

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


@lru_cache()
def get_settings() -> Settings:
    """
    Create cached settings instance
    This ensures settings are loaded only once
    """
    return Settings()
