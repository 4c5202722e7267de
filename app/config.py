from __future__ import annotations

import os
from typing import Literal, Mapping

from pydantic import BaseModel, Field, field_validator


LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseModel):
    host: str = Field(default="0.0.0.0", min_length=1)
    port: int = Field(default=8080, ge=1, le=65535)
    log_level: LogLevel = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    raw = {
        "host": env.get("TIME_SERVICE_HOST"),
        "port": env.get("TIME_SERVICE_PORT"),
        "log_level": env.get("TIME_SERVICE_LOG_LEVEL"),
    }
    # unset or blank variables keep the defaults
    return Settings(**{key: value.strip() for key, value in raw.items() if value and value.strip()})


settings = load_settings()
