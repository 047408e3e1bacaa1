"""
formatter – `{placeholder}` expansion for formattable values.

Format strings follow Python's format-string rules with one twist: the
whole field name is the placeholder key, resolved through the value's
`get_placeholder`. So:

  • {r}       → obj.get_placeholder("r")
  • {r:02x}   → the same value, rendered with the ``02x`` spec
  • {{ / }}   → literal braces

An unknown key is an `UnknownPlaceholderError`; a malformed format string or
a spec the value cannot honour is an `InvalidFormatStringError`.
"""

import string
from typing import Any, Mapping, Optional, Sequence, Tuple

from niji_templates.core.errors import InvalidFormatStringError, RenderError, UnknownPlaceholderError
from niji_templates.core.interfaces.formatting import FormattableProtocol, PlaceholderValue


class PlaceholderFormatter(string.Formatter):
    """Formatter bound to one formattable object."""

    def __init__(self, obj: FormattableProtocol) -> None:
        super().__init__()
        self._obj = obj

    def get_field(self, field_name: str, args: Sequence[Any], kwargs: Mapping[str, Any]) -> Tuple[Any, str]:
        return self.get_value(field_name, args, kwargs), field_name

    def get_value(self, key, args, kwargs) -> PlaceholderValue:  # type: ignore[override]
        name = str(key)
        value = self._obj.get_placeholder(name)
        if value is None:
            raise UnknownPlaceholderError(self._obj.type_name(), name)
        return value

    def expand(self, format_string: str) -> str:
        try:
            return self.vformat(format_string, (), {})
        except RenderError:
            raise
        except (ValueError, TypeError) as exc:
            raise InvalidFormatStringError(self._obj.type_name(), format_string, str(exc)) from exc


def format_value(obj: FormattableProtocol, format_string: Optional[str] = None) -> str:
    """Format *obj* with *format_string*, or with its default format when None."""
    fmt = obj.default_format() if format_string is None else format_string
    return PlaceholderFormatter(obj).expand(fmt)


def display(obj: FormattableProtocol) -> str:
    return format_value(obj, obj.default_format())
