# config.py
"""
Settings read from the environment.

- SMV_LOG_LEVEL            -> logging level name (INFO)
- SMV_DEFAULT_ALGORITHM    -> preselected algorithm id (kmp)
- SMV_PLAYBACK_INTERVAL_MS -> delay between auto-played steps (600)
- SMV_CORS_ORIGINS         -> comma list of allowed API origins (*)
- SMV_MAX_TEXT_LENGTH      -> longest accepted text (200000)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Tuple

from algorithms.errors import ConfigurationError
from algorithms.registry import get_algorithm

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    default_algorithm: str = "kmp"
    playback_interval_ms: int = 600
    cors_origins: Tuple[str, ...] = ("*",)
    max_text_length: int = 200_000


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(
            f"{name} must be an integer, got '{raw}'",
            context={"variable": name, "value": raw},
        ) from None


def load_settings() -> Settings:
    origins = os.getenv("SMV_CORS_ORIGINS", "*")
    default_algorithm = os.getenv("SMV_DEFAULT_ALGORITHM", "kmp").strip().lower()
    get_algorithm(default_algorithm)  # ConfigurationError on a typo
    return Settings(
        log_level=os.getenv("SMV_LOG_LEVEL", "INFO").upper(),
        default_algorithm=default_algorithm,
        playback_interval_ms=max(50, _int_env("SMV_PLAYBACK_INTERVAL_MS", 600)),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()) or ("*",),
        max_text_length=_int_env("SMV_MAX_TEXT_LENGTH", 200_000),
    )


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    else:
        root.setLevel(level)
