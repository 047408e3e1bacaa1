from __future__ import annotations

from typing import Mapping, Optional

from niji_templates.constants import DEFAULT_END_DELIMITER, DEFAULT_START_DELIMITER
from niji_templates.core.errors import (
    CannotInsertCollectionError,
    CannotInvertSectionError,
    IndexOutOfBoundsError,
    InvalidFormatStringError,
    InvalidIndexError,
    ParseError,
    ParseErrorKind,
    RenderError,
    TemplateError,
    TemplateLoadError,
    UnknownPlaceholderError,
)
from niji_templates.core.interfaces import (
    FormattableProtocol,
    LoggerFactoryProtocol,
    LoggerLikeProtocol,
    TemplateEngineProtocol,
    TemplateProtocol,
)
from niji_templates.core.models import Insert, Name, Position, Section, SetFormat, Text
from niji_templates.core.values import (
    NIL,
    BoolValue,
    FormattableValue,
    ListValue,
    MapValue,
    NilValue,
    StringValue,
    Value,
    to_value,
)
from niji_templates.formats.color import Color
from niji_templates.io.loader import load_template
from niji_templates.logging.factory import DefaultLoggerFactory
from niji_templates.rendering.factory_config import EngineConfig
from niji_templates.rendering.formatter import display, format_value
from niji_templates.rendering.template import Template, parse
from niji_templates.rendering.template_engine import TemplateEngine

__version__ = '0.3.0'


def template_engine_factory(
    *,
    start_delimiter: str = DEFAULT_START_DELIMITER,
    end_delimiter: str = DEFAULT_END_DELIMITER,
    formats: Optional[Mapping[str, str]] = None,
    logger: Optional[LoggerLikeProtocol] = None,
    logger_factory: Optional[LoggerFactoryProtocol] = None,
) -> TemplateEngine:
    """Factory helper that returns a configured TemplateEngine."""
    cfg = EngineConfig(
        start_delimiter=start_delimiter,
        end_delimiter=end_delimiter,
        formats=dict(formats or {}),
        logger=logger,
        logger_factory=logger_factory or DefaultLoggerFactory(),
    )
    return TemplateEngine(cfg)


__all__ = [
    'Template',
    'TemplateEngine',
    'EngineConfig',
    'parse',
    'load_template',
    'template_engine_factory',
    'format_value',
    'display',
    'Color',
    # Values
    'Value',
    'NIL',
    'NilValue',
    'BoolValue',
    'StringValue',
    'ListValue',
    'MapValue',
    'FormattableValue',
    'to_value',
    # Tokens
    'Name',
    'Text',
    'Insert',
    'Section',
    'SetFormat',
    'Position',
    # Protocols
    'FormattableProtocol',
    'TemplateProtocol',
    'TemplateEngineProtocol',
    'LoggerLikeProtocol',
    'LoggerFactoryProtocol',
    'DefaultLoggerFactory',
    # Errors
    'TemplateError',
    'ParseError',
    'ParseErrorKind',
    'RenderError',
    'InvalidIndexError',
    'IndexOutOfBoundsError',
    'CannotInsertCollectionError',
    'CannotInvertSectionError',
    'UnknownPlaceholderError',
    'InvalidFormatStringError',
    'TemplateLoadError',
]
