"""Configuration utilities for infrastructure layer."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_WEBHOOK_URL = "https://n8n.birsonraki.net/webhook/test"
DEFAULT_TIMEOUT_S = 60.0
DEFAULT_LANGUAGE = "tr"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def load_env_file(path: Optional[Path] = None) -> bool:
    """
    Load variables from a .env file without overriding the environment.

    Args:
        path: Explicit .env path, defaults to ./.env

    Returns:
        True if a file was loaded
    """
    env_path = path or Path.cwd() / ".env"
    if not env_path.exists():
        return False
    return load_dotenv(env_path)


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _get_positive_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings.

    Environment variables:
        KALORIFY_WEBHOOK_URL: Analysis webhook endpoint
        KALORIFY_TIMEOUT_S: HTTP timeout in seconds (default 60)
        KALORIFY_LANGUAGE: Display language (default "tr")
        KALORIFY_SPLIT_ERRORS: Distinct failure messages (default false)
        LOG_LEVEL: Log level (default INFO)

    Example .env:
        KALORIFY_WEBHOOK_URL=https://example.com/webhook/analyze
        KALORIFY_LANGUAGE=en
    """

    webhook_url: str = DEFAULT_WEBHOOK_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_S
    language: str = DEFAULT_LANGUAGE
    split_errors: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Settings:
        """
        Build settings from environment variables.

        Raises:
            ValueError: If a numeric or boolean variable is invalid
        """
        return cls(
            webhook_url=os.getenv("KALORIFY_WEBHOOK_URL") or DEFAULT_WEBHOOK_URL,
            timeout_seconds=_get_positive_float("KALORIFY_TIMEOUT_S", DEFAULT_TIMEOUT_S),
            language=(os.getenv("KALORIFY_LANGUAGE") or DEFAULT_LANGUAGE).strip().lower(),
            split_errors=_get_bool("KALORIFY_SPLIT_ERRORS", False),
            log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        )
