from __future__ import annotations

"""Typed configuration for the template engine facade."""

from dataclasses import dataclass, field
from typing import Mapping, Optional

from niji_templates.constants import DEFAULT_END_DELIMITER, DEFAULT_START_DELIMITER
from niji_templates.core.interfaces.logging import LoggerFactoryProtocol, LoggerLikeProtocol


@dataclass(frozen=True)
class EngineConfig:
    """Immutable settings used to seed every template an engine compiles.

    `logger_factory` supplies the "engine", "parse" and "render" loggers;
    `logger`, when given, replaces the "engine" one only.
    """
    start_delimiter: str = DEFAULT_START_DELIMITER
    end_delimiter: str = DEFAULT_END_DELIMITER
    formats: Mapping[str, str] = field(default_factory=dict)
    logger: Optional[LoggerLikeProtocol] = None
    logger_factory: Optional[LoggerFactoryProtocol] = None

    def __post_init__(self) -> None:
        if not self.start_delimiter or not self.end_delimiter:
            raise ValueError("delimiters must be non-empty")
