from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Position:
    """Line/column pair; lines are 1-based, columns 0-based."""
    line: int = 1
    column: int = 0

    def format(self) -> str:
        return f"{self.line}:{self.column}"

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class Name:
    """Dotted path addressed by inserts and sections.

    An empty path is the self reference `.`; otherwise each segment is an
    identifier or a decimal list index.
    """
    segments: Tuple[str, ...] = ()

    @classmethod
    def self_ref(cls) -> "Name":
        return cls(())

    @classmethod
    def dotted(cls, path: str) -> "Name":
        if path == ".":
            return cls(())
        return cls(tuple(path.split(".")))

    @property
    def is_self(self) -> bool:
        return not self.segments

    def __str__(self) -> str:
        return ".".join(self.segments) if self.segments else "."


@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class Insert:
    name: Name
    format: Optional[str] = None


@dataclass(frozen=True)
class Section:
    name: Name
    inverted: bool = False
    children: Tuple["Token", ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SetFormat:
    type_name: str
    format: str


Token = Union[Text, Insert, Section, SetFormat]
