from __future__ import annotations

"""Exception taxonomy for compiling and rendering templates.

Two disjoint families hang off `TemplateError`:

* `ParseError` – fatal to a compile. Carries a `ParseErrorKind`, the detail
  arguments of that kind and the scanner `Position` at detection. Its text is
  ``"<message> (<line>:<column>)"``.
* `RenderError` – fatal to one render call. One subclass per failure mode so
  embedders can catch precisely what they care about.

`TemplateLoadError` covers reading template files from disk.
"""

import enum
from pathlib import Path
from typing import Optional, Sequence

from niji_templates.core.models import Position


class TemplateError(ValueError):
    """Base class for every error raised by niji_templates."""


class ParseErrorKind(enum.Enum):
    EXPECTED_IDENT = "Expected an identifier"
    EXPECTED_CLOSING_DELIM = 'Expected closing delimiter "{0}"'
    EXPECTED_NAME = "Expected a name"
    EXPECTED_FORMAT_STRING = "Expected a quoted format string"
    MISMATCHED_SECTION_END = 'Mismatched section end: expected "/{1}", found "/{0}"'
    MISSING_SECTION_END = 'Section "{0}" was never closed'
    MISSING_START_DELIMITER_DEF = "Missing a definition for the start delimiter"
    MISSING_END_DELIMITER_DEF = "Missing a definition for the end delimiter"

    def describe(self, details: Sequence[str] = ()) -> str:
        return self.value.format(*details)


class ParseError(TemplateError):
    """Raised when template source text cannot be compiled."""

    def __init__(self, kind: ParseErrorKind, position: Position, *details: str) -> None:
        self.kind = kind
        self.position = position
        self.details = tuple(details)
        super().__init__(f"{kind.describe(self.details)} ({position.format()})")

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column


class RenderError(TemplateError):
    """Raised when a compiled template cannot be rendered against a value."""


class InvalidIndexError(RenderError):
    def __init__(self, segment: str) -> None:
        self.segment = segment
        super().__init__(f'"{segment}" is not a valid array index')


class IndexOutOfBoundsError(RenderError):
    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"Index {index} is out of bounds for array of length {length}")


class CannotInsertCollectionError(RenderError):
    def __init__(self, name: str, kind: str) -> None:
        self.name = name
        self.kind = kind
        super().__init__(f'Cannot directly insert {kind} value "{name}"')


class CannotInvertSectionError(RenderError):
    def __init__(self, name: str, kind: str) -> None:
        self.name = name
        self.kind = kind
        super().__init__(f'Cannot create inverted sections from {kind} value "{name}"')


class UnknownPlaceholderError(RenderError):
    def __init__(self, type_name: str, key: str) -> None:
        self.type_name = type_name
        self.key = key
        super().__init__(f'Failed to format {type_name}: unknown placeholder "{key}"')


class InvalidFormatStringError(RenderError):
    def __init__(self, type_name: str, format_string: str, reason: str) -> None:
        self.type_name = type_name
        self.format_string = format_string
        self.reason = reason
        super().__init__(f'Failed to format {type_name} with "{format_string}": {reason}')


class TemplateLoadError(TemplateError):
    def __init__(self, path: Path, reason: Optional[str] = None) -> None:
        self.path = path
        msg = f"Failed to load {path}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
