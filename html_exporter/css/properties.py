"""
Style property keys.

Keys form a closed set split into three value domains: colors, strings
(keywords and other text) and integers. Each enum member's value is the
CSS property name it is read from.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Tuple, Type, Union

from .color import Color


class CssColorProperty(Enum):
    COLOR = "color"
    BACKGROUND_COLOR = "background-color"
    BORDER_COLOR = "border-color"
    BORDER_TOP_COLOR = "border-top-color"
    BORDER_RIGHT_COLOR = "border-right-color"
    BORDER_BOTTOM_COLOR = "border-bottom-color"
    BORDER_LEFT_COLOR = "border-left-color"


class CssStringProperty(Enum):
    FONT_FAMILY = "font-family"
    FONT_WEIGHT = "font-weight"
    FONT_STYLE = "font-style"
    TEXT_DECORATION = "text-decoration"
    TEXT_ALIGN = "text-align"
    VERTICAL_ALIGN = "vertical-align"
    WHITE_SPACE = "white-space"
    BORDER_WIDTH = "border-width"
    BORDER_STYLE = "border-style"
    BORDER_TOP_STYLE = "border-top-style"
    BORDER_RIGHT_STYLE = "border-right-style"
    BORDER_BOTTOM_STYLE = "border-bottom-style"
    BORDER_LEFT_STYLE = "border-left-style"
    BORDER_TOP_WIDTH = "border-top-width"
    BORDER_RIGHT_WIDTH = "border-right-width"
    BORDER_BOTTOM_WIDTH = "border-bottom-width"
    BORDER_LEFT_WIDTH = "border-left-width"


class CssIntegerProperty(Enum):
    FONT_SIZE = "font-size"
    WIDTH = "width"
    HEIGHT = "height"


CssProperty = Union[CssColorProperty, CssStringProperty, CssIntegerProperty]

# property enum -> python type its values must have
PROPERTY_DOMAINS: Dict[Type[Enum], type] = {
    CssColorProperty: Color,
    CssStringProperty: str,
    CssIntegerProperty: int,
}

_BY_NAME: Dict[str, CssProperty] = {
    member.value: member
    for enum_type in PROPERTY_DOMAINS
    for member in enum_type
}


def find_property(name: str) -> Optional[CssProperty]:
    """Look up a property key by its CSS name (case-insensitive)."""
    return _BY_NAME.get(name.strip().lower())


def is_property(key: object) -> bool:
    return type(key) in PROPERTY_DOMAINS


def value_type(key: CssProperty) -> type:
    return PROPERTY_DOMAINS[type(key)]


def all_properties() -> Tuple[CssProperty, ...]:
    return tuple(_BY_NAME.values())
