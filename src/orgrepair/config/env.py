"""Environment variable loaders for configuration."""

from __future__ import annotations

import os

from .errors import ConfigurationError


def optional_env_var(name: str) -> str | None:
    """Return the variable's value, treating unset and blank values alike."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value


def raw_env_var(name: str) -> str | None:
    """Return the variable verbatim; only unset or empty values count as missing."""

    value = os.getenv(name)
    if not value:
        return None
    return value


def optional_env_int(name: str, *, minimum: int = 0) -> int | None:
    """Return an integer environment variable or raise if it is malformed."""

    value = optional_env_var(name)
    if value is None:
        return None
    try:
        parsed = int(value.strip())
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from exc
    if parsed < minimum:
        raise ConfigurationError(f"{name} must be >= {minimum}, got {parsed}")
    return parsed
