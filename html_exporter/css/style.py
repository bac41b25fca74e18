"""
Style value for HTML elements.

A Style maps property keys (see ``properties``) to typed values. Styles
are built once and then treated as immutable: resolved styles are cached
and shared between elements, so ``add_property`` must only be used while
constructing a fresh Style.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional

from ..exceptions import StyleError
from .color import Color
from .properties import (
    CssColorProperty,
    CssIntegerProperty,
    CssProperty,
    CssStringProperty,
    is_property,
    value_type,
)


class Style(Mapping):
    """
    Immutable-by-convention mapping of CSS property keys to values.

    Equality is by content, so a Style compares equal to another Style
    (or plain mapping) holding the same keys and values.
    """

    BOLD_FONT_STYLE = "bold"
    ITALIC_FONT_STYLE = "italic"
    TEXT_DECORATION_UNDERLINE = "underline"

    LEFT_ALIGN = "left"
    RIGHT_ALIGN = "right"
    CENTER_ALIGN = "center"
    JUSTIFY_ALIGN = "justify"

    TOP_ALIGN = "top"
    MIDDLE_ALIGN = "middle"
    BOTTOM_ALIGN = "bottom"

    __slots__ = ("_properties",)

    def __init__(self, properties: Optional[Mapping] = None) -> None:
        self._properties: Dict[CssProperty, Any] = {}
        if properties:
            for key, value in properties.items():
                self.add_property(key, value)

    def add_property(self, key: CssProperty, value: Any) -> "Style":
        """
        Add a property while building this Style.

        Args:
            key: Property key from one of the Css*Property enums
            value: Color, str or int matching the key's domain

        Returns:
            This Style, to allow chaining

        Raises:
            StyleError: If the key is unknown or the value has the wrong type
        """
        if not is_property(key):
            raise StyleError("Unknown style property", details=repr(key))
        expected = value_type(key)
        if isinstance(value, bool) or not isinstance(value, expected):
            raise StyleError(
                f"Invalid value for {key.value}",
                details=f"expected {expected.__name__}, got {type(value).__name__}",
            )
        self._properties[key] = value
        return self

    def get_property(self, key: CssProperty) -> Optional[Any]:
        return self._properties.get(key)

    # ------------------------------------------------------------------
    def __getitem__(self, key: CssProperty) -> Any:
        return self._properties[key]

    def __iter__(self) -> Iterator[CssProperty]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __repr__(self) -> str:
        body = ", ".join(f"{key.value}={value!r}" for key, value in self._properties.items())
        return f"Style({body})"

    # ------------------------------------------------------------------
    def is_bold(self) -> bool:
        weight = self.get_property(CssStringProperty.FONT_WEIGHT)
        if weight is None:
            return False
        if weight.isdigit():
            return int(weight) >= 600
        return weight in (self.BOLD_FONT_STYLE, "bolder")

    def is_italic(self) -> bool:
        return self.get_property(CssStringProperty.FONT_STYLE) in (self.ITALIC_FONT_STYLE, "oblique")

    def is_underlined(self) -> bool:
        decoration = self.get_property(CssStringProperty.TEXT_DECORATION) or ""
        return self.TEXT_DECORATION_UNDERLINE in decoration.split()

    def font_size(self) -> Optional[int]:
        return self.get_property(CssIntegerProperty.FONT_SIZE)

    def color(self) -> Optional[Color]:
        return self.get_property(CssColorProperty.COLOR)

    def background_color(self) -> Optional[Color]:
        return self.get_property(CssColorProperty.BACKGROUND_COLOR)

    def horizontal_alignment(self) -> Optional[str]:
        return self.get_property(CssStringProperty.TEXT_ALIGN)

    def vertical_alignment(self) -> Optional[str]:
        return self.get_property(CssStringProperty.VERTICAL_ALIGN)

    def to_dict(self) -> Dict[str, Any]:
        """Plain ``{css-name: value}`` view with colors rendered as CSS text."""
        return {
            key.value: value.to_css() if isinstance(value, Color) else value
            for key, value in self._properties.items()
        }
