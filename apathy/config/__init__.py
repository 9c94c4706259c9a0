"""apathy runtime configuration.

Provides typed settings for the logging layer and the HTTP API.
All settings are backed by environment variables following the AP_* naming convention.

Example:
    >>> from apathy.config import settings
    >>> settings.api_port
    8000

Environment Variables:
    AP_LOG_DIR: Directory for JSONL log files (default: unset, no file logging)
    AP_LOG_MAX_SIZE_MB: Rotate log files above this size in MB (default: unset, 10 when CI=true)
    AP_LOG_MAX_FILES: Number of rotated log files to keep (default: 5, 3 when CI=true)
    AP_API_PORT: Port for `python -m apathy.api.server` (default: 8000)
    AP_API_BASE_DIR: Base directory for relative paths sent to the API (default: server cwd)
    AP_REDACT_PATHS: Set to 0 to log home directories unredacted (default: 1)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


def _env(name: str, default: str) -> str:
    """Get environment variable with AP_* prefix validation."""
    if not name.startswith("AP_"):
        raise ValueError(f"Only AP_* env vars are allowed, got: {name}")
    return os.getenv(name, default)


def _env_int(name: str, default: int) -> int:
    """Get environment variable as integer."""
    raw = _env(name, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


def _env_optional_int(name: str, ci_default: Optional[int] = None) -> Optional[int]:
    raw = _env(name, "")
    if raw:
        try:
            return int(raw)
        except ValueError:
            pass
    if os.getenv("CI") == "true":
        return ci_default
    return None


def _env_optional(name: str) -> Optional[str]:
    return _env(name, "") or None


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name, "1" if default else "0").strip().lower()
    return raw not in {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Settings:
    """Runtime settings for apathy.

    Values are read from the environment when the instance is created.
    Use `load_settings()` to pick up changes made after import (tests use
    monkeypatch.setenv followed by load_settings()).
    """

    log_dir: Optional[str] = None
    log_max_size_mb: Optional[int] = None
    log_max_files: int = 5
    api_port: int = 8000
    api_base_dir: Optional[str] = None
    redact_paths: bool = True


def load_settings() -> Settings:
    """Build a Settings instance from the current AP_* environment."""
    max_files_default = 3 if os.getenv("CI") == "true" else 5
    return Settings(
        log_dir=_env_optional("AP_LOG_DIR"),
        log_max_size_mb=_env_optional_int("AP_LOG_MAX_SIZE_MB", ci_default=10),
        log_max_files=_env_int("AP_LOG_MAX_FILES", max_files_default),
        api_port=_env_int("AP_API_PORT", 8000),
        api_base_dir=_env_optional("AP_API_BASE_DIR"),
        redact_paths=_env_bool("AP_REDACT_PATHS", True),
    )


# Module-level instance for convenient access
settings = load_settings()

__all__ = ["settings", "Settings", "load_settings"]
