"""
Renderer component for niji_templates.

`TokenRenderer` walks a token tree depth-first, left to right, appending to
an output buffer. It owns no state beyond the override table it was handed:
`SetFormat` tokens write into that table in place, so the caller decides
whether the effect outlives the render (a `Template` passes its own table).

Section semantics by resolved value:

    value            normal                 inverted
    string/fmt/map   once, value pushed     CannotInvertSectionError
    boolean b        once if b              once if not b
    nil              never                  once
    array            once per item          once per item, last item first

The walk keeps an explicit stack of lazy (token, context) iterators, one per
entered section, so nesting depth does not consume Python call frames.
"""

from typing import Iterable, Iterator, List, MutableMapping, Optional, Sequence, Tuple

from niji_templates.core.errors import CannotInsertCollectionError, CannotInvertSectionError
from niji_templates.core.interfaces.logging import LoggerLikeProtocol
from niji_templates.core.models import Insert, Section, SetFormat, Text, Token
from niji_templates.core.values import (
    BoolValue,
    FormattableValue,
    ListValue,
    MapValue,
    NilValue,
    StringValue,
    Value,
    kind_of,
)
from niji_templates.logging.helpers import get_logger, trace_render
from niji_templates.rendering.formatter import format_value
from niji_templates.rendering.resolver import ContextStack, NameResolver

_Frame = Iterator[Tuple[Token, ContextStack]]


def _scoped(tokens: Sequence[Token], contexts: Iterable[ContextStack]) -> _Frame:
    for context in contexts:
        for token in tokens:
            yield token, context


class TokenRenderer:
    """Render token trees against a value, honouring per-type format overrides."""

    def __init__(
        self,
        formats: MutableMapping[str, str],
        *,
        resolver: Optional[NameResolver] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._formats = formats
        self._resolver = resolver or NameResolver()
        self._log = logger or get_logger("render")

    def render(self, tokens: Sequence[Token], root: Value) -> str:
        buf: List[str] = []
        stack: List[_Frame] = [_scoped(tokens, [(root,)])]
        while stack:
            step = next(stack[-1], None)
            if step is None:
                stack.pop()
                continue

            token, context = step
            if isinstance(token, Text):
                buf.append(token.text)
            elif isinstance(token, Insert):
                self._render_insert(buf, token, context)
            elif isinstance(token, Section):
                frame = self._enter_section(token, context)
                if frame is not None:
                    stack.append(frame)
            elif isinstance(token, SetFormat):
                self._formats[token.type_name] = token.format
                self._log.debug("format for %s set to %r", token.type_name, token.format)
            else:
                raise TypeError(f"unexpected token {token!r}")
        return "".join(buf)

    def _enter_section(self, section: Section, context: ContextStack) -> Optional[_Frame]:
        """Return the iterator over the section body's renders, or None to skip it."""
        value = self._resolver.resolve(section.name, context)
        trace_render(self._log, "section", name=str(section.name), kind=kind_of(value), inverted=section.inverted)

        if isinstance(value, (StringValue, FormattableValue, MapValue)):
            if section.inverted:
                raise CannotInvertSectionError(str(section.name), kind_of(value))
            return _scoped(section.children, [(value,) + context])
        if isinstance(value, BoolValue):
            if value.value == section.inverted:
                return None
            return _scoped(section.children, [(value,) + context])
        if isinstance(value, NilValue):
            if not section.inverted:
                return None
            return _scoped(section.children, [(value,) + context])
        if isinstance(value, ListValue):
            items = reversed(value.items) if section.inverted else value.items
            return _scoped(section.children, ((item,) + context for item in items))
        raise TypeError(f"unexpected value {value!r}")

    def _render_insert(self, buf: List[str], insert: Insert, context: ContextStack) -> None:
        value = self._resolver.resolve(insert.name, context)
        trace_render(self._log, "insert", name=str(insert.name), kind=kind_of(value))

        if isinstance(value, (ListValue, MapValue)):
            raise CannotInsertCollectionError(str(insert.name), kind_of(value))
        if isinstance(value, BoolValue):
            buf.append(str(value))
        elif isinstance(value, StringValue):
            buf.append(value.value)
        elif isinstance(value, NilValue):
            pass
        elif isinstance(value, FormattableValue):
            buf.append(format_value(value.obj, self.effective_format(insert, value)))
        else:
            raise TypeError(f"unexpected value {value!r}")

    def effective_format(self, insert: Insert, value: FormattableValue) -> str:
        """Inline format, else the type's override, else the value's default."""
        if insert.format is not None:
            return insert.format
        override = self._formats.get(value.type_name)
        if override is not None:
            return override
        return value.obj.default_format()
