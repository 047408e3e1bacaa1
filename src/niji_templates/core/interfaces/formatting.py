from __future__ import annotations
from typing import Optional, Protocol, Union, runtime_checkable

# Primitive a placeholder may resolve to.
PlaceholderValue = Union[str, int, float]


@runtime_checkable
class FormattableProtocol(Protocol):
    """Capability of values whose text is driven by a named format string.

    `type_name` keys the per-template override table, `default_format` is
    used when neither an inline format nor an override applies, and
    `get_placeholder` maps a `{placeholder}` name to a primitive or None
    when the name is unknown.
    """

    def type_name(self) -> str:
        ...

    def default_format(self) -> str:
        ...

    def get_placeholder(self, name: str) -> Optional[PlaceholderValue]:
        ...
