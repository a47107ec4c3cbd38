"""Environment-driven configuration models."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_IMAGE_MODEL = "gemini-2.5-flash-image"
DEFAULT_ASPECT_RATIO = "16:9"


def _get_env(name: str, default: str | None = None) -> str | None:
    """Return an environment variable or the provided default value."""
    value: str | None = os.getenv(name)
    if value is None:
        return default
    stripped: str = value.strip()
    return stripped if stripped else default


def _require_env(name: str) -> str:
    """Return a required environment variable or raise a ValueError."""
    value: str | None = _get_env(name)
    if value is None:
        raise ValueError(f"Missing required environment variable: {name}")
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    """Return an environment variable parsed as bool."""
    value: str | None = _get_env(name)
    if value is None:
        return default
    return value.lower() in {"1", "true", "yes", "y", "on"}


@dataclass(slots=True, frozen=True)
class GeminiConfig:
    """Gemini image-generation settings.

    Only the credential comes from the environment; model and aspect ratio
    are fixed for every request.
    """

    api_key: str
    model: str = DEFAULT_IMAGE_MODEL
    aspect_ratio: str = DEFAULT_ASPECT_RATIO

    @classmethod
    def from_env(cls) -> "GeminiConfig":
        """Load Gemini settings from environment variables."""
        return cls(api_key=_require_env("GEMINI_API_KEY"))


@dataclass(slots=True, frozen=True)
class AppConfig:
    """Runtime settings for the thumbnail client."""

    gemini: GeminiConfig
    log_level: str
    show_data_uri: bool

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load client runtime settings from environment variables."""
        return cls(
            gemini=GeminiConfig.from_env(),
            log_level=_get_env("THUMBNAIL_LOG_LEVEL", "INFO") or "INFO",
            show_data_uri=_get_env_bool("THUMBNAIL_SHOW_DATA_URI", False),
        )
