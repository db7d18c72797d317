from __future__ import annotations

import os
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bounded_cache.domain.constraints import MAX_KEYS, PURGE_FRACTION


def get_env_int(
    env_name: str,
    default_value: int,
    *,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
) -> int:
    raw_value = os.getenv(env_name)
    if raw_value is None:
        value = default_value
    else:
        try:
            value = int(raw_value)
        except ValueError as exc:
            raise ValueError(
                f"{env_name} must be an integer, got {raw_value!r}"
            ) from exc

    if min_value is not None and value < min_value:
        raise ValueError(f"{env_name} must be >= {min_value}, got {value}")
    if max_value is not None and value > max_value:
        raise ValueError(f"{env_name} must be <= {max_value}, got {value}")
    return value


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_keys: int = Field(default=MAX_KEYS, ge=1)
    purge_fraction: int = Field(default=PURGE_FRACTION, ge=1)
    log_level: str = "INFO"
    log_format: Literal["text", "json"] = "text"

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()


def load_settings() -> Settings:
    return Settings(
        max_keys=get_env_int("CACHE_MAX_KEYS", MAX_KEYS, min_value=1),
        purge_fraction=get_env_int("CACHE_PURGE_FRACTION", PURGE_FRACTION, min_value=1),
        log_level=os.getenv("CACHE_LOG_LEVEL", "INFO"),
        log_format=os.getenv("CACHE_LOG_FORMAT", "text").lower(),
    )
