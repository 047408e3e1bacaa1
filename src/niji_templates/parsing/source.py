from __future__ import annotations
"""Character cursor used by the template parser.

`Source` is a small value over a shared text buffer: an index plus the
line/column it corresponds to. Cloning copies three integers, so the parser
can clone, attempt a sub-parse, and either drop the clone or commit it back
with `commit()`.

Positions start at line 1, column 0. A newline bumps the line and resets the
column to 0.
"""

from typing import Optional

from niji_templates.core.models import Position


class Source:
    __slots__ = ("_text", "_index", "_line", "_column")

    def __init__(self, text: str, *, index: int = 0, line: int = 1, column: int = 0) -> None:
        self._text = text
        self._index = index
        self._line = line
        self._column = column

    def __repr__(self) -> str:
        return f"Source(index={self._index}, position={self.position})"

    @property
    def text(self) -> str:
        return self._text

    @property
    def index(self) -> int:
        return self._index

    @property
    def position(self) -> Position:
        return Position(self._line, self._column)

    def at_end(self) -> bool:
        return self._index >= len(self._text)

    def peek(self) -> Optional[str]:
        """Return the next character without consuming it (None at EOF)."""
        if self._index >= len(self._text):
            return None
        return self._text[self._index]

    def next(self) -> Optional[str]:
        """Consume one character and advance the position."""
        if self._index >= len(self._text):
            return None
        ch = self._text[self._index]
        self._index += 1
        if ch == "\n":
            self._line += 1
            self._column = 0
        else:
            self._column += 1
        return ch

    def advance(self, count: int) -> str:
        """Consume up to *count* characters and return them."""
        out: list[str] = []
        for _ in range(count):
            ch = self.next()
            if ch is None:
                break
            out.append(ch)
        return "".join(out)

    def clone(self) -> "Source":
        return Source(self._text, index=self._index, line=self._line, column=self._column)

    def commit(self, other: "Source") -> None:
        """Adopt the cursor state of *other* (a clone of this source)."""
        self._index = other._index
        self._line = other._line
        self._column = other._column

    def match_literal(self, literal: str) -> bool:
        """Advance past *literal* if it sits at the cursor; otherwise stay put."""
        if not literal or not self._text.startswith(literal, self._index):
            return False
        self.advance(len(literal))
        return True

    def find(self, literal: str) -> int:
        """Return the absolute index of the next *literal* at or after the cursor, or -1."""
        return self._text.find(literal, self._index)

    def skip_whitespace(self) -> None:
        while True:
            ch = self.peek()
            if ch is None or not ch.isspace():
                return
            self.next()
