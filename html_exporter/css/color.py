"""Color values used by color-typed style properties."""

from __future__ import annotations

from typing import NamedTuple, Optional

from tinycss2.color3 import parse_color


class Color(NamedTuple):
    """An sRGB color with 0-255 channels and a 0-1 alpha."""

    red: int
    green: int
    blue: int
    alpha: float = 1.0

    @classmethod
    def parse(cls, value: str) -> Optional["Color"]:
        """
        Parse a CSS color (named, hex, ``rgb()``, ``hsl()``...).

        Returns None for invalid input and for ``currentColor``, which has
        no fixed value.
        """
        rgba = parse_color(value.strip()) if value else None
        if rgba is None or isinstance(rgba, str):
            return None
        return cls(
            int(round(rgba.red * 255)),
            int(round(rgba.green * 255)),
            int(round(rgba.blue * 255)),
            float(rgba.alpha),
        )

    @property
    def hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def to_css(self) -> str:
        if self.alpha >= 1:
            return self.hex
        return f"rgba({self.red}, {self.green}, {self.blue}, {self.alpha:g})"


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
GREEN = Color(0, 128, 0)
BLUE = Color(0, 0, 255)
YELLOW = Color(255, 255, 0)
GRAY = Color(128, 128, 128)
TRANSPARENT = Color(0, 0, 0, 0.0)
