from __future__ import annotations

import regex

from PySrtgears.Helpers.ColorNames import color_names

_HEX_COLOR_PATTERN = regex.compile(r'^[0-9a-fA-F]{6}$')

class Color:
    """
    Simple RGB color representation.
    Supports conversion from #RRGGBB or a color name, and to the packed BGR integer used by Sub Station Alpha.
    """

    def __init__(self, r : int, g : int, b : int):
        self.r = max(0, min(255, r))
        self.g = max(0, min(255, g))
        self.b = max(0, min(255, b))

    def __eq__(self, value: object) -> bool:
        if not isinstance(value, Color):
            return False

        return (self.r, self.g, self.b) == (value.r, value.g, value.b)

    def __repr__(self) -> str:
        return f"Color(r={self.r}, g={self.g}, b={self.b})"

    @classmethod
    def from_hex(cls, hex_str : str) -> Color:
        """Create Color from #RRGGBB or RRGGBB format"""
        hex_str = hex_str.strip().removeprefix('#')
        if not _HEX_COLOR_PATTERN.match(hex_str):
            raise ValueError(f"Invalid hex color format: #{hex_str}")

        return cls(
            int(hex_str[0:2], 16),
            int(hex_str[2:4], 16),
            int(hex_str[4:6], 16)
        )

    @classmethod
    def from_name(cls, name : str) -> Color:
        """Create Color from a standard color name, e.g. 'red' or 'LightGray'"""
        hex_str = color_names.get(name.strip().lower())
        if hex_str is None:
            raise ValueError(f"Unknown color name: {name}")

        return cls.from_hex(hex_str)

    @classmethod
    def resolve(cls, value : str|None, default : Color|None = None) -> Color:
        """
        Interpret a hex value or a color name, falling back to the default color if it is neither
        """
        if value:
            for factory in (cls.from_hex, cls.from_name):
                try:
                    return factory(value.strip().removeprefix('#'))
                except ValueError:
                    pass

        return default or default_color

    def to_hex(self) -> str:
        """Convert to #RRGGBB format"""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def to_bgr(self) -> int:
        """Packed integer with blue in the high byte and red in the low byte"""
        return (self.b << 16) | (self.g << 8) | self.r

# Light gray, used when a color cannot be resolved
default_color = Color(0xef, 0xef, 0xef)
