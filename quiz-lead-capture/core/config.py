"""
Runtime configuration.

Settings are read from the process environment, after loading an optional
.env file from the quiz-lead-capture directory.

Environment variables (all optional):
- FROM_EMAIL: sender address for both emails
- ADMIN_EMAIL: recipient of the new-lead alert
- AWS_REGION: region of the SES endpoint
- SES_CONNECT_TIMEOUT_SECONDS / SES_READ_TIMEOUT_SECONDS: per-call SES timeouts
- CONSULTATION_URL: booking link used in the confirmation email
- LOG_LEVEL: root log level for the entry points

AWS credentials are not read here; boto3 resolves them through its default
chain (AWS_ACCESS_KEY_ID / AWS_SECRET_ACCESS_KEY, profiles, instance roles).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DEFAULT_FROM_EMAIL = "noreply@yourdomain.com"
DEFAULT_ADMIN_EMAIL = "admin@yourdomain.com"
DEFAULT_AWS_REGION = "us-east-1"
DEFAULT_CONSULTATION_URL = "https://calendly.com/your-consultation"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigurationError(RuntimeError):
    """Raised when an environment variable holds an unusable value."""
    pass


@dataclass(frozen=True, slots=True)
class Settings:
    """Validated runtime settings."""

    from_email: str
    admin_email: str
    aws_region: str
    ses_connect_timeout_seconds: float
    ses_read_timeout_seconds: float
    consultation_url: str
    log_level: str


def _read(env: Mapping[str, str], name: str, default: str) -> str:
    # Unset and blank both fall back to the default.
    value = env.get(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _positive_float(env: Mapping[str, str], name: str, default: str) -> float:
    raw = _read(env, name, default)
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}")
    if value <= 0:
        raise ConfigurationError(f"{name} must be > 0, got {raw!r}")
    return value


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from a mapping of environment variables.

    Args:
        env: Variables to read (default: os.environ)

    Raises:
        ConfigurationError: If a value is present but invalid
    """
    source = os.environ if env is None else env

    log_level = _read(source, "LOG_LEVEL", "INFO").upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigurationError(
            f"LOG_LEVEL must be one of {'/'.join(sorted(_LOG_LEVELS))}, got {log_level!r}"
        )

    return Settings(
        from_email=_read(source, "FROM_EMAIL", DEFAULT_FROM_EMAIL),
        admin_email=_read(source, "ADMIN_EMAIL", DEFAULT_ADMIN_EMAIL),
        aws_region=_read(source, "AWS_REGION", DEFAULT_AWS_REGION),
        ses_connect_timeout_seconds=_positive_float(source, "SES_CONNECT_TIMEOUT_SECONDS", "5"),
        ses_read_timeout_seconds=_positive_float(source, "SES_READ_TIMEOUT_SECONDS", "10"),
        consultation_url=_read(source, "CONSULTATION_URL", DEFAULT_CONSULTATION_URL),
        log_level=log_level,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, loaded once from the environment."""
    return load_settings()


__all__ = [
    "ConfigurationError",
    "Settings",
    "get_settings",
    "load_settings",
]
