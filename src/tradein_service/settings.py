from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServiceSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Optional operator data; the built-in bracket table and constants apply when unset
    brackets_path: str = Field(default="", alias="TRADEIN_BRACKETS_PATH")
    valuation_config_path: str = Field(default="", alias="TRADEIN_CONFIG_PATH")
    max_batch_size: int = Field(default=500, alias="TRADEIN_MAX_BATCH_SIZE")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="json", alias="LOG_FORMAT")
