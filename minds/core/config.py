from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    # Remote service
    base_url: str = Field(default='https://mdb.ai', alias='MINDS_BASE_URL')
    project: str = Field(default='mindsdb', alias='MINDS_PROJECT')

    # Transport
    request_timeout_s: float = Field(default=30.0, alias='MINDS_REQUEST_TIMEOUT')


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]
