from __future__ import annotations

"""Public surface for niji_templates.core.

Protocols, the token/value models and the error taxonomy live here so that
parsing and rendering can depend on them without depending on each other.
"""

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
    PlaceholderValue,
    TemplateEngineProtocol,
    TemplateProtocol,
)
from niji_templates.core.models import Insert, Name, Position, Section, SetFormat, Text, Token
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

__all__ = [
    # Errors
    "TemplateError",
    "ParseError",
    "ParseErrorKind",
    "RenderError",
    "InvalidIndexError",
    "IndexOutOfBoundsError",
    "CannotInsertCollectionError",
    "CannotInvertSectionError",
    "UnknownPlaceholderError",
    "InvalidFormatStringError",
    "TemplateLoadError",
    # Protocols
    "FormattableProtocol",
    "PlaceholderValue",
    "TemplateEngineProtocol",
    "TemplateProtocol",
    # Models
    "Position",
    "Name",
    "Text",
    "Insert",
    "Section",
    "SetFormat",
    "Token",
    # Values
    "NIL",
    "NilValue",
    "BoolValue",
    "StringValue",
    "ListValue",
    "MapValue",
    "FormattableValue",
    "Value",
    "to_value",
]
