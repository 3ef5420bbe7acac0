from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Final, Optional

from skirmish.engine.dispatcher import FALLBACK_NOTICE, FALLBACKS

_LOG = logging.getLogger(__name__)

_FALLBACK_ENV: Final[str] = "SKIRMISH_FALLBACK"
_HEADINGS_ENV: Final[str] = "SKIRMISH_HEADINGS"
_TRANSCRIPT_ENV: Final[str] = "SKIRMISH_TRANSCRIPT"
_LOGGING_ENV: Final[str] = "SKIRMISH_LOGGING"
_DEBUG_ENV: Final[str] = "SKIRMISH_DEBUG"
_LOG_DIR_ENV: Final[str] = "SKIRMISH_LOG_DIR"
_DEFAULT_LOG_DIR: Final[tuple[str, str]] = ("state", "logs")
_CONFIG_LOGGED = False


def _parse_bool(raw: Optional[str], *, default: bool = False) -> bool:
    if raw is None:
        return default
    token = raw.strip().lower()
    if token in {"1", "true", "yes", "on"}:
        return True
    if token in {"0", "false", "no", "off"}:
        return False
    return default


def get_fallback() -> str:
    """Return the fallback used for entities lacking a capability.

    Controlled by ``SKIRMISH_FALLBACK``; anything other than ``notice`` or
    ``silent`` falls back to ``notice``.
    """

    raw = os.getenv(_FALLBACK_ENV)
    if raw is None:
        return FALLBACK_NOTICE
    candidate = raw.strip().lower()
    return candidate if candidate in FALLBACKS else FALLBACK_NOTICE


def headings_enabled() -> bool:
    return _parse_bool(os.getenv(_HEADINGS_ENV), default=True)


def get_transcript_path() -> Optional[Path]:
    raw = os.getenv(_TRANSCRIPT_ENV)
    if raw is None or not raw.strip():
        return None
    return Path(raw.strip()).expanduser()


def logging_enabled() -> bool:
    return _parse_bool(os.getenv(_LOGGING_ENV), default=False)


def debug_enabled() -> bool:
    return _parse_bool(os.getenv(_DEBUG_ENV), default=False)


def get_log_dir() -> Path:
    raw = os.getenv(_LOG_DIR_ENV)
    if raw and raw.strip():
        return Path(raw.strip()).expanduser()
    return Path(*_DEFAULT_LOG_DIR)


def log_configuration_once(*, fallback: str, headings: bool, transcript: Optional[Path]) -> None:
    global _CONFIG_LOGGED

    if _CONFIG_LOGGED:
        return

    _LOG.info("fallback=%s headings=%s transcript=%s", fallback, headings, transcript)
    _CONFIG_LOGGED = True
