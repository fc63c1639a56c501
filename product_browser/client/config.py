# product_browser/client/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    # Proxy base URL; pointing it at https://dummyjson.com skips the proxy entirely
    api_base_url: str = "http://localhost:5000/api"

    model_config = SettingsConfigDict(env_prefix="PRODUCT_BROWSER_")


@lru_cache
def get_client_settings() -> ClientSettings:
    return ClientSettings()
