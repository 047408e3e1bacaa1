from __future__ import annotations
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TemplateProtocol(Protocol):
    """A compiled template that renders against a value graph."""

    def render(self, value: Any) -> str:
        ...

    def set_format(self, type_name: str, format_string: str) -> None:
        ...


@runtime_checkable
class TemplateEngineProtocol(Protocol):
    """Compile-and-render surface for template source text."""

    def compile(self, source: str) -> TemplateProtocol:
        ...

    def render(self, source: str, value: Any) -> str:
        ...
