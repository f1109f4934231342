from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

GOOGLEBOT_UA = "Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    user_agent: str = Field(default=GOOGLEBOT_UA, alias="META_COLLECTOR_USER_AGENT")
    read_chunk_size: int = Field(default=65536, gt=0, alias="META_COLLECTOR_READ_CHUNK_SIZE")

    log_level: str = Field(default="WARNING", alias="META_COLLECTOR_LOG_LEVEL")
    log_json: bool = Field(default=False, alias="META_COLLECTOR_LOG_JSON")


def load_settings() -> Settings:
    return Settings()
