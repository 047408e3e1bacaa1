from __future__ import annotations

"""RGBA colour as a formattable template value.

Placeholders:
    r g b a        channel as int (0-255)
    rx gx bx ax    channel as two lowercase hex digits
    rf gf bf af    channel as float (0.0-1.0)

The default format is ``#{rx}{gx}{bx}{ax}``.
"""

import string
from dataclasses import dataclass
from typing import Optional

from niji_templates.core.interfaces.formatting import PlaceholderValue

_CHANNELS = ("r", "g", "b", "a")


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in _CHANNELS:
            value = getattr(self, channel)
            if not 0 <= value <= 255:
                raise ValueError(f"channel {channel} out of range: {value}")

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Parse ``#rgb``, ``#rrggbb`` or ``#rrggbbaa``."""
        if not text.startswith("#"):
            raise ValueError(f"Color strings must start with a '#'! (got \"{text}\")")
        digits = text[1:]
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits) + "ff"
        elif len(digits) == 6:
            digits += "ff"
        elif len(digits) != 8:
            raise ValueError(f"Colors must have 3, 6, or 8 hex digits! (got {len(digits)})")
        if not all(ch in string.hexdigits for ch in digits):
            raise ValueError(f"\"{text[1:]}\" is not a valid hexadecimal number")
        num = int(digits, 16)
        return cls((num >> 24) & 0xFF, (num >> 16) & 0xFF, (num >> 8) & 0xFF, num & 0xFF)

    def __str__(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}{self.a:02x}"

    def type_name(self) -> str:
        return "color"

    def default_format(self) -> str:
        return "#{rx}{gx}{bx}{ax}"

    def get_placeholder(self, name: str) -> Optional[PlaceholderValue]:
        if name in _CHANNELS:
            return getattr(self, name)
        channel, suffix = name[:1], name[1:]
        if channel not in _CHANNELS:
            return None
        value = getattr(self, channel)
        if suffix == "x":
            return f"{value:02x}"
        if suffix == "f":
            return value / 255.0
        return None
