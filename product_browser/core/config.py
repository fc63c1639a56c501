from functools import lru_cache
from typing import Literal
import os
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["development", "production"]

ENV_FILES: dict[str, str] = {
    "development": ".env.development",
    "production": ".env.production",
}


class Settings(BaseSettings):

    # Core
    APP_ENV: EnvName = "development"
    APP_NAME: str = "ProductBrowser"
    DEBUG: bool = False
    GIT_SHA: str = "unknown"

    # Upstream catalog (DummyJSON)
    UPSTREAM_BASE_URL: str = "https://dummyjson.com"

    # Product detail cache
    product_cache_ttl: int = Field(60, gt=0)          # seconds, absolute expiry
    product_cache_maxsize: int = Field(1024, gt=0)    # entries kept before the store prunes

    # CORS: comma separated list of origins
    ALLOWED_ORIGINS: str = ""

    # API
    api_prefix: str = "/api"

    model_config = SettingsConfigDict(env_file=None, case_sensitive=True, extra="ignore")

    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Settings for the current APP_ENV. Values come from the environment first,
    then from the matching .env file (unknown APP_ENV values fall back to production).
    """
    app_env = os.getenv("APP_ENV", "development")
    return Settings(
        _env_file=ENV_FILES.get(app_env, ENV_FILES["production"]),
        _env_file_encoding="utf-8",
    )
