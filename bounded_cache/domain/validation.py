from __future__ import annotations

from typing import Any


def _validate_positive_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")
    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {value}")
    return value


def validate_max_keys(max_keys: Any) -> int:
    return _validate_positive_int("max_keys", max_keys)


def validate_purge_fraction(purge_fraction: Any) -> int:
    return _validate_positive_int("purge_fraction", purge_fraction)
