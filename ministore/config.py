from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables or a .env file.
    """
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "MiniStore Inventory"
    APP_VERSION: str = "1.0.0"
    API_PREFIX: str = "/api/v1"

    LOG_LEVEL: str = "INFO"

    # Receipt formatting
    CURRENCY_SYMBOL: str = "$"
    PRICE_DECIMALS: int = 1

    # Treat "5.500" as five thousand five hundred when parsing typed prices
    THOUSANDS_DOT_HEURISTIC: bool = True

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8000
    RELOAD: bool = False


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
