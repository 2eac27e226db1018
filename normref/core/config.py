from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from normref.core.exceptions import ConfigError
from normref.parsing.act_numbers import DEFAULT_ACT_WINDOW


def load_env() -> None:
    load_dotenv()


class Settings(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    log_level: str = Field("INFO", alias="LOG_LEVEL")
    act_number_window: int = Field(DEFAULT_ACT_WINDOW, alias="ACT_NUMBER_WINDOW", ge=0)
    max_input_chars: int = Field(2_000_000, alias="MAX_INPUT_CHARS", gt=0)
    internal_ingest_key: Optional[str] = Field(None, alias="INTERNAL_INGEST_KEY")
    allow_unauth_ingest: bool = Field(False, alias="ALLOW_UNAUTH_INGEST")
    allowed_origins: str = Field("", alias="ALLOWED_ORIGINS")
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(8000, alias="PORT", gt=0, lt=65536)

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()

    @property
    def origins(self) -> list[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        load_env()
        try:
            _settings = Settings(**os.environ)
        except ValidationError as exc:
            raise ConfigError(f"Invalid settings: {exc}") from exc
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None
