from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://travel-app-backend-u2tw.vercel.app/api"


class Settings(BaseSettings):
    app_name: str = "Travel Management System"
    environment: str = Field("local", validation_alias="ENVIRONMENT")
    api_base_url: str = Field(DEFAULT_API_URL, validation_alias="CATALOG_API_URL")
    # None means requests waits forever, same as the browser console did.
    request_timeout: Optional[float] = Field(None, validation_alias="CATALOG_API_TIMEOUT")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    price_currency: str = Field("USD", validation_alias="PRICE_CURRENCY")
    price_locale: str = Field("en_IN", validation_alias="PRICE_LOCALE")

    model_config = SettingsConfigDict(case_sensitive=False, populate_by_name=True)


@lru_cache()
def get_settings() -> Settings:
    load_dotenv(".env")
    return Settings()
