"""Runtime settings resolved from environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .messages import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES


@dataclass(frozen=True)
class Settings:
    """Settings shared by the CLI and the API."""

    language: str = DEFAULT_LANGUAGE  # Language of status messages
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Read ``VOICECART_LANGUAGE`` and ``VOICECART_LOG_LEVEL``.

    Raises:
        ValueError: If either variable holds an unsupported value.
    """
    language = os.getenv("VOICECART_LANGUAGE", DEFAULT_LANGUAGE).strip().lower()
    if language not in SUPPORTED_LANGUAGES:
        raise ValueError(
            f"VOICECART_LANGUAGE must be one of {sorted(SUPPORTED_LANGUAGES)}, got {language!r}"
        )

    log_level = os.getenv("VOICECART_LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"VOICECART_LOG_LEVEL is not a logging level: {log_level!r}")

    return Settings(language=language, log_level=log_level)


def configure_logging(settings: Settings) -> None:
    """Apply the configured level to the root logger."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
