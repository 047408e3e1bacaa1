from __future__ import annotations
"""
Dotted-name resolution over a context stack.

The stack is a tuple of values, innermost first. Lookup follows the
Mustache scope chain:

- Empty stack → nil. Empty path (`.`) → the innermost value.
- nil, boolean, string and formattable values cannot be indexed; lookup
  moves on to the next outer scope with the same path.
- Arrays take the first segment as a decimal index. A bad index is an
  error, never a fallback.
- Maps take the first segment as a key. On a hit, the found value replaces
  the map as innermost scope and the remaining path continues from there; on
  a miss the full path is retried one scope further out.
"""

from typing import Sequence, Tuple

from niji_templates.core.errors import IndexOutOfBoundsError, InvalidIndexError
from niji_templates.core.models import Name
from niji_templates.core.values import NIL, ListValue, MapValue, Value

ContextStack = Tuple[Value, ...]


def parse_index(segment: str) -> int:
    if not (segment.isascii() and segment.isdigit()):
        raise InvalidIndexError(segment)
    return int(segment)


class NameResolver:
    """Resolve `Name`s against a context stack."""

    def resolve(self, name: Name, context: Sequence[Value]) -> Value:
        return self.resolve_path(name.segments, tuple(context))

    def resolve_path(self, path: Tuple[str, ...], context: ContextStack) -> Value:
        while True:
            if not context:
                return NIL
            value = context[0]
            if not path:
                return value

            if isinstance(value, ListValue):
                index = parse_index(path[0])
                if index >= len(value.items):
                    raise IndexOutOfBoundsError(index, len(value.items))
                context = (value.items[index],) + context[1:]
                path = path[1:]
            elif isinstance(value, MapValue):
                found = value.get(path[0])
                if found is None:
                    context = context[1:]
                else:
                    context = (found,) + context[1:]
                    path = path[1:]
            else:
                context = context[1:]
