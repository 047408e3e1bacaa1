from __future__ import annotations

"""Small logging helpers to standardize niji_templates logger names, configuration and tracing.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Root logger configuration for the 'niji_templates' logger.
    - get_logger: Namespaced logger factory ('niji_templates.*').
    - trace_render utilities gated by NIJI_TEMPLATES_TRACE.

The version attached to JSON records is resolved lazily from
niji_templates.__version__, falling back to NIJI_TEMPLATES_VERSION and then
'unknown'.
"""

import logging
import os
from typing import Optional, TextIO

from niji_templates.constants import LOGGER_NAME, TRACE_ENV, VERSION_ENV
from niji_templates.core.interfaces.logging import LoggerLikeProtocol


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'niji_templates.parse').
        - msg: Formatted message string.
        - version: niji_templates.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            # Imported here; the package root imports this module.
            from niji_templates import __version__ as _v  # type: ignore
            return str(_v)
        except ImportError:
            return os.getenv(VERSION_ENV, "unknown")

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'niji_templates' logger once and return it.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    base = logging.getLogger(LOGGER_NAME)
    if base.handlers:
        base.setLevel(level)
        return base

    import sys as _sys

    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or _sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'niji_templates'."""
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if name.startswith(LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def is_trace_enabled() -> bool:
    """Check if render tracing is enabled via env flag."""
    return os.getenv(TRACE_ENV) == "1"


def trace_render(logger: LoggerLikeProtocol, message: str, **ctx) -> None:
    """Emit debug-verbosity render trace messages only when enabled.

    Args:
        logger: Target logger.
        message: Human-readable description.
        **ctx: Optional structured context appended in debug format.
    """
    if not is_trace_enabled() or not logger.isEnabledFor(logging.DEBUG):
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
