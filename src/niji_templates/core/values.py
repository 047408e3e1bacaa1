from __future__ import annotations

"""Value model a template renders against.

The six variants are mutually exclusive frozen dataclasses joined by the
`Value` union. Renderers dispatch on the concrete class; every site that
inspects a resolved value handles all six.

`to_value` builds a value graph from plain Python data so embedders rarely
need to construct variants by hand.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple, Union

from niji_templates.core.interfaces.formatting import FormattableProtocol


@dataclass(frozen=True)
class NilValue:
    def __str__(self) -> str:
        return "nil"


@dataclass(frozen=True)
class BoolValue:
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class StringValue:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ListValue:
    items: Tuple["Value", ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class MapValue:
    entries: Mapping[str, "Value"] = field(default_factory=dict)

    def get(self, key: str):
        return self.entries.get(key)


@dataclass(frozen=True)
class FormattableValue:
    obj: FormattableProtocol

    @property
    def type_name(self) -> str:
        return self.obj.type_name()


Value = Union[NilValue, BoolValue, StringValue, ListValue, MapValue, FormattableValue]

NIL = NilValue()

VALUE_TYPES = (NilValue, BoolValue, StringValue, ListValue, MapValue, FormattableValue)


def kind_of(value: Value) -> str:
    """Short human label of a value's variant, used in error messages."""
    if isinstance(value, NilValue):
        return "nil"
    if isinstance(value, BoolValue):
        return "boolean"
    if isinstance(value, StringValue):
        return "string"
    if isinstance(value, ListValue):
        return "array"
    if isinstance(value, MapValue):
        return "map"
    return value.type_name


def to_value(obj: Any) -> Value:
    """Convert plain Python data into a `Value` graph.

    * None → nil, bool → boolean, str → string.
    * int / float → string holding ``str(obj)``.
    * Mappings → map with stringified keys; lists and tuples → array.
    * Objects satisfying `FormattableProtocol` → formattable.
    * Existing values are returned unchanged.

    Raises:
        TypeError: for anything else.
    """
    if isinstance(obj, VALUE_TYPES):
        return obj
    if obj is None:
        return NIL
    if isinstance(obj, bool):
        return BoolValue(obj)
    if isinstance(obj, str):
        return StringValue(obj)
    if isinstance(obj, (int, float)):
        return StringValue(str(obj))
    if isinstance(obj, Mapping):
        entries: Dict[str, Value] = {str(k): to_value(v) for k, v in obj.items()}
        return MapValue(entries)
    if isinstance(obj, FormattableProtocol):
        return FormattableValue(obj)
    if isinstance(obj, Sequence) and not isinstance(obj, (bytes, bytearray)):
        return ListValue(tuple(to_value(v) for v in obj))
    raise TypeError(f"cannot convert {type(obj).__name__} to a template value")
