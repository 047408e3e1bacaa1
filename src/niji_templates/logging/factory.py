from __future__ import annotations

import logging
from typing import Optional, TextIO

from niji_templates.logging.helpers import get_logger, setup_base_logger


class DefaultLoggerFactory:
    """Hand out `niji_templates.*` loggers for engine components.

    With `level` left as None the base logger is never touched, so the
    embedding application's logging configuration applies. Given a level, the
    base logger is configured through `setup_base_logger` before the first
    logger is returned.
    """

    def __init__(
        self,
        *,
        json_logs: bool = False,
        level: Optional[int] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        self._json = bool(json_logs)
        self._level = level
        self._stream: Optional[TextIO] = stream
        self._configured = level is None

    def get_logger(self, name: str) -> logging.Logger:
        if not self._configured:
            setup_base_logger(json_logs=self._json, level=int(self._level), stream=self._stream)
            self._configured = True
        return get_logger(name)
