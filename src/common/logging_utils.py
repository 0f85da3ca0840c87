"""Logging helpers shared by the transport, hunt pipeline and CLI.

Structured fields travel through the standard ``extra=`` mechanism so any
handler/formatter can pick them up without changing call sites.
"""
from __future__ import annotations

import logging
import time
import urllib.parse
from typing import Any, Dict, Optional

from constants import Constants


def configure_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logging for the CLI.

    Args:
        level: Level name (DEBUG, INFO, ...).
        logfile: Optional path; when set, log records go to this file instead of stderr.
    """
    numeric = getattr(logging, str(level).upper(), logging.INFO)
    if logfile:
        logging.basicConfig(filename=logfile, level=numeric, format=Constants.LOG_FORMAT, force=True)
    else:
        logging.basicConfig(level=numeric, format=Constants.LOG_FORMAT, force=True)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build an ``extra`` mapping for structured log records, dropping None values."""
    return {k: v for k, v in fields.items() if v is not None}


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records would be emitted by this logger."""
    return logger.isEnabledFor(logging.DEBUG)


def safe_url(url: str) -> str:
    """Strip credentials, query and fragment from a URL before logging it."""
    try:
        parts = urllib.parse.urlsplit(url)
    except ValueError:
        return "<invalid-url>"
    netloc = parts.hostname or ""
    if parts.port:
        netloc = f"{netloc}:{parts.port}"
    return urllib.parse.urlunsplit((parts.scheme, netloc, parts.path, "", ""))


class Timer:
    """Context manager measuring wall-clock duration."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        self._end = None
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self._end = time.perf_counter()

    def duration_ms(self) -> int:
        """Elapsed milliseconds; valid inside or after the ``with`` block."""
        end = self._end if self._end is not None else time.perf_counter()
        return int((end - self._start) * 1000)
