# intake_form/config.py
from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    database_url: str = Field("sqlite:///./intake_form.db", validation_alias="DATABASE_URL")

    api_base_url: str = Field("http://127.0.0.1:3000", validation_alias="API_BASE_URL")
    request_timeout: float = Field(10.0, validation_alias="REQUEST_TIMEOUT")

    host: str = Field("0.0.0.0", validation_alias="HOST")
    port: int = Field(3000, validation_alias="PORT")
    cors_allow_origins: List[str] = Field(["*"], validation_alias="CORS_ALLOW_ORIGINS")

    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
