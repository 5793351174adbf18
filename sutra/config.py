"""Runtime settings read from environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, field_validator

VALID_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}

_ENV_VARS = {
    "log_level": "SUTRA_LOG_LEVEL",
    "structured_logs": "SUTRA_STRUCTURED_LOGS",
    "explain_model": "SUTRA_EXPLAIN_MODEL",
    "log_capacity": "SUTRA_LOG_CAPACITY",
    "openai_api_key": "OPENAI_API_KEY",
}


class Settings(BaseModel):
    log_level: str = "INFO"
    structured_logs: bool = True
    explain_model: str = "gpt-4o-mini"
    log_capacity: int = Field(default=50, ge=1, le=10_000)
    openai_api_key: str | None = None

    @field_validator("log_level", mode="before")
    @classmethod
    def _validate_log_level(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise ValueError("Expected a string value.")
        normalized = value.strip().upper()
        if normalized not in VALID_LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value!r}")
        return normalized

    @field_validator("explain_model", mode="before")
    @classmethod
    def _validate_model_name(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Model name must not be empty.")
        return value.strip()

    @field_validator("openai_api_key", mode="before")
    @classmethod
    def _blank_key_is_missing(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build ``Settings`` from *environ* (defaults to ``os.environ``).

    Raises ``pydantic.ValidationError`` when a variable holds an invalid value.
    """
    env = os.environ if environ is None else environ
    values = {field: env[var] for field, var in _ENV_VARS.items() if var in env}
    return Settings(**values)
