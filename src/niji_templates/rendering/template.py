from __future__ import annotations

"""Compiled templates.

A `Template` pairs an immutable token tree with a format-override table
(type name → format string). The table can be seeded with `set_format`
before or between renders and is also written by `SetFormat` tokens while
rendering. Those writes persist on the instance: a later render of the same
template sees formats set by an earlier one.

Rendering and `set_format` hold the instance's lock, so concurrent renders of
one template run one at a time. Use `copy()` for an independent override
table over the same tree.
"""

import threading
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from niji_templates.constants import DEFAULT_END_DELIMITER, DEFAULT_START_DELIMITER
from niji_templates.core.interfaces.logging import LoggerLikeProtocol
from niji_templates.core.models import Token
from niji_templates.core.values import to_value
from niji_templates.logging.helpers import get_logger
from niji_templates.parsing.parser import TemplateParser
from niji_templates.rendering.renderer import TokenRenderer


class Template:
    def __init__(
        self,
        tokens: Tuple[Token, ...] = (),
        *,
        formats: Optional[Mapping[str, str]] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._tokens: Tuple[Token, ...] = tuple(tokens)
        self._formats: Dict[str, str] = dict(formats or {})
        self._lock = threading.RLock()
        self._log = logger or get_logger("render")

    @classmethod
    def parse(
        cls,
        source: str,
        *,
        start_delimiter: str = DEFAULT_START_DELIMITER,
        end_delimiter: str = DEFAULT_END_DELIMITER,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> "Template":
        """Compile *source*; raises `ParseError` on the first syntax error."""
        parser = TemplateParser(logger=logger)
        tokens = parser.parse(source, start_delimiter=start_delimiter, end_delimiter=end_delimiter)
        return cls(tokens, logger=logger)

    @property
    def tokens(self) -> Tuple[Token, ...]:
        return self._tokens

    @property
    def formats(self) -> Mapping[str, str]:
        """Read-only snapshot of the override table."""
        with self._lock:
            return MappingProxyType(dict(self._formats))

    def set_format(self, type_name: str, format_string: str) -> None:
        with self._lock:
            self._formats[type_name] = format_string

    def copy(self) -> "Template":
        with self._lock:
            return Template(self._tokens, formats=self._formats, logger=self._log)

    def render(self, value: Any = None) -> str:
        """Render against *value* (a `Value` or plain data, see `to_value`).

        Raises:
            RenderError: on the first failure; nothing partial is returned.
        """
        root = to_value(value)
        with self._lock:
            return TokenRenderer(self._formats, logger=self._log).render(self._tokens, root)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Template):
            return NotImplemented
        return self._tokens == other._tokens and dict(self.formats) == dict(other.formats)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Template(tokens={self._tokens!r}, formats={dict(self._formats)!r})"


def parse(
    source: str,
    *,
    start_delimiter: str = DEFAULT_START_DELIMITER,
    end_delimiter: str = DEFAULT_END_DELIMITER,
    logger: Optional[LoggerLikeProtocol] = None,
) -> Template:
    return Template.parse(
        source, start_delimiter=start_delimiter, end_delimiter=end_delimiter, logger=logger
    )
