from __future__ import annotations

"""
parser – recursive-descent compiler from template text to a token tree.

Grammar (delimiters are runtime-configurable, default ``{{`` / ``}}``)::

    Template    := (Instruction | Token)*
    Token       := Section | Insert | TextRun
    Section     := Delim ('#'|'^') Name Delim Token* Delim '/' Name Delim
    Insert      := Delim Name [':' Quoted] Delim
    Instruction := Delim '=' Ident ':' Quoted '=' Delim      -- SetFormat
                 | Delim '=' NewStart Ws NewEnd '=' Delim     -- delimiters
    Name        := '.' | Ident ('.' Ident)*
    Ident       := [A-Za-z0-9_-]+

Every production works on a clone of the `Source` and commits it back only
on success. The current delimiter pair lives in a `DelimiterState` threaded
through every call; a reassignment applies to everything parsed after it,
including the rest of an enclosing section.

Open sections are kept on an explicit stack rather than the call stack, so
nesting depth is bounded by memory only.

Parsing is fail-fast: the first `ParseError` aborts the compile.
"""

import string
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from niji_templates.constants import DEFAULT_END_DELIMITER, DEFAULT_START_DELIMITER
from niji_templates.core.errors import ParseError, ParseErrorKind
from niji_templates.core.interfaces.logging import LoggerLikeProtocol
from niji_templates.core.models import Insert, Name, Section, SetFormat, Text, Token
from niji_templates.logging.helpers import get_logger
from niji_templates.parsing.source import Source

_IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_-")


class _Reassigned:
    """Marker returned when a delimiter instruction produced no token."""

    def __repr__(self) -> str:
        return "<delimiters reassigned>"


_REASSIGNED = _Reassigned()

_TagResult = Tuple[Name, Optional[str]]
_Parsed = Union[Token, _Reassigned]


@dataclass
class DelimiterState:
    """Mutable start/end delimiter pair shared by one parse call."""
    start: str = DEFAULT_START_DELIMITER
    end: str = DEFAULT_END_DELIMITER


@dataclass
class _OpenSection:
    name: Name
    inverted: bool
    children: List[Token] = field(default_factory=list)


class TemplateParser:
    """Compile template source text into an immutable token tuple."""

    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._log = logger or get_logger("parse")

    def parse(
        self,
        text: str,
        *,
        start_delimiter: str = DEFAULT_START_DELIMITER,
        end_delimiter: str = DEFAULT_END_DELIMITER,
    ) -> Tuple[Token, ...]:
        if not start_delimiter or not end_delimiter:
            raise ValueError("delimiters must be non-empty")

        source = Source(text)
        state = DelimiterState(start_delimiter, end_delimiter)
        tokens: List[Token] = []
        open_sections: List[_OpenSection] = []

        while True:
            if open_sections:
                current = open_sections[-1]
                close_at = source.position
                closed = self._parse_tag(source, state, "/")
                if closed is not None:
                    if closed[0] != current.name:
                        raise ParseError(
                            ParseErrorKind.MISMATCHED_SECTION_END, close_at, str(closed[0]), str(current.name)
                        )
                    open_sections.pop()
                    section = Section(current.name, current.inverted, tuple(current.children))
                    (open_sections[-1].children if open_sections else tokens).append(section)
                    continue

            item = self._parse_instruction(source, state)
            if item is None:
                opened = self._parse_section_start(source, state)
                if opened is not None:
                    open_sections.append(opened)
                    continue
                item = self._parse_insert_or_text(source, state)
            if item is None:
                if open_sections:
                    raise ParseError(
                        ParseErrorKind.MISSING_SECTION_END, source.position, str(open_sections[-1].name)
                    )
                break
            if item is not _REASSIGNED:
                (open_sections[-1].children if open_sections else tokens).append(item)  # type: ignore[arg-type]

        self._log.debug("compiled template: %d top-level tokens", len(tokens))
        return tuple(tokens)

    # ------------------------------------------------------------------ #
    #  Productions                                                        #
    # ------------------------------------------------------------------ #
    def _parse_insert_or_text(self, source: Source, state: DelimiterState) -> Optional[Token]:
        tag = self._parse_tag(source, state, None, allow_format=True)
        if tag is not None:
            name, fmt = tag
            return Insert(name, fmt)
        return self._parse_text(source, state)

    def _parse_section_start(self, source: Source, state: DelimiterState) -> Optional[_OpenSection]:
        opened = self._parse_tag(source, state, "#")
        if opened is not None:
            return _OpenSection(opened[0], inverted=False)
        opened = self._parse_tag(source, state, "^")
        if opened is not None:
            return _OpenSection(opened[0], inverted=True)
        return None

    def _parse_tag(
        self,
        source: Source,
        state: DelimiterState,
        operator: Optional[str],
        *,
        allow_format: bool = False,
    ) -> Optional[_TagResult]:
        """Parse ``<start> [op] Name [':' Quoted] <end>``.

        Returns None when the start delimiter or the operator is absent; once
        both matched, any further mismatch is a hard error.
        """
        src = source.clone()
        if not src.match_literal(state.start):
            return None

        src.skip_whitespace()
        if operator is not None:
            if src.peek() != operator:
                return None
            src.next()
            src.skip_whitespace()

        name = self._parse_name(src)
        if name is None:
            raise ParseError(ParseErrorKind.EXPECTED_NAME, src.position)
        src.skip_whitespace()

        fmt: Optional[str] = None
        if allow_format and src.peek() == ":":
            src.next()
            src.skip_whitespace()
            fmt = self._parse_quoted(src)
            if fmt is None:
                raise ParseError(ParseErrorKind.EXPECTED_FORMAT_STRING, src.position)
            src.skip_whitespace()

        if not src.match_literal(state.end):
            raise ParseError(ParseErrorKind.EXPECTED_CLOSING_DELIM, src.position, state.end)

        source.commit(src)
        return name, fmt

    def _parse_name(self, source: Source) -> Optional[Name]:
        if source.peek() == ".":
            source.next()
            return Name.self_ref()

        first = self._parse_ident(source)
        if first is None:
            return None

        segments = [first]
        while source.peek() == ".":
            source.next()
            ident = self._parse_ident(source)
            if ident is None:
                raise ParseError(ParseErrorKind.EXPECTED_IDENT, source.position)
            segments.append(ident)
        return Name(tuple(segments))

    @staticmethod
    def _parse_ident(source: Source) -> Optional[str]:
        chars: List[str] = []
        while True:
            ch = source.peek()
            if ch is None or ch not in _IDENT_CHARS:
                break
            chars.append(ch)
            source.next()
        return "".join(chars) or None

    @staticmethod
    def _parse_quoted(source: Source) -> Optional[str]:
        """Parse a double-quoted string; backslash escapes the next character."""
        if source.peek() != '"':
            return None
        source.next()

        out: List[str] = []
        while True:
            ch = source.next()
            if ch == "\\":
                ch = source.next()
                if ch is None:
                    break
                out.append(ch)
                continue
            if ch is None:
                break
            if ch == '"':
                return "".join(out)
            out.append(ch)
        raise ParseError(ParseErrorKind.EXPECTED_CLOSING_DELIM, source.position, '"')

    def _parse_instruction(self, source: Source, state: DelimiterState) -> Optional[_Parsed]:
        src = source.clone()
        if not src.match_literal(f"{state.start}="):
            return None

        closing = f"={state.end}"
        src.skip_whitespace()

        set_format = self._parse_format_directive(src)
        if set_format is not None:
            src.skip_whitespace()
            if not src.match_literal(closing):
                raise ParseError(ParseErrorKind.EXPECTED_CLOSING_DELIM, src.position, closing)
            source.commit(src)
            return set_format

        start = self._parse_delimiter_definition(src)
        if start is None:
            raise ParseError(ParseErrorKind.MISSING_START_DELIMITER_DEF, src.position)
        src.skip_whitespace()

        end = self._parse_delimiter_definition(src)
        if end is None:
            raise ParseError(ParseErrorKind.MISSING_END_DELIMITER_DEF, src.position)
        src.skip_whitespace()

        if not src.match_literal(closing):
            raise ParseError(ParseErrorKind.EXPECTED_CLOSING_DELIM, src.position, closing)

        source.commit(src)
        self._log.debug(
            "delimiters reassigned %r %r -> %r %r at %s",
            state.start, state.end, start, end, source.position,
        )
        state.start = start
        state.end = end
        return _REASSIGNED

    def _parse_format_directive(self, source: Source) -> Optional[SetFormat]:
        """Recognise ``Ident ':' Quoted``; leaves *source* untouched otherwise."""
        probe = source.clone()
        type_name = self._parse_ident(probe)
        if type_name is None:
            return None
        probe.skip_whitespace()
        if probe.peek() != ":":
            return None
        probe.next()
        probe.skip_whitespace()
        if probe.peek() != '"':
            return None

        fmt = self._parse_quoted(probe)
        source.commit(probe)
        return SetFormat(type_name, fmt or "")

    @staticmethod
    def _parse_delimiter_definition(source: Source) -> Optional[str]:
        chars: List[str] = []
        while True:
            ch = source.peek()
            if ch is None or ch.isspace() or ch == "=":
                break
            chars.append(ch)
            source.next()
        return "".join(chars) or None

    @staticmethod
    def _parse_text(source: Source, state: DelimiterState) -> Optional[Text]:
        """Consume literal text up to the next start delimiter (or EOF)."""
        stop = source.find(state.start)
        if stop == -1:
            stop = len(source.text)
        count = stop - source.index
        if count <= 0:
            return None
        return Text(source.advance(count))


def parse_tokens(
    text: str,
    *,
    start_delimiter: str = DEFAULT_START_DELIMITER,
    end_delimiter: str = DEFAULT_END_DELIMITER,
    logger: Optional[LoggerLikeProtocol] = None,
) -> Tuple[Token, ...]:
    """Compile *text* with a fresh parser and return its top-level tokens."""
    return TemplateParser(logger=logger).parse(
        text, start_delimiter=start_delimiter, end_delimiter=end_delimiter
    )
