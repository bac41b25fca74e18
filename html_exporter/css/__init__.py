"""
CSS module for element style resolution.

This module contains the style value types, the declaration parser and
translator, the stylesheet rule-table builder, and the StyleMap resolver.
"""

from .color import Color
from .declarations import Declaration, parse_declarations
from .properties import CssColorProperty, CssIntegerProperty, CssStringProperty, find_property
from .style import Style
from .style_generator import StyleGenerator
from .style_map import StyleMap, StyleMapStats
from .style_merger import merge_styles
from .stylesheet import StylesheetParser, parse_stylesheet

__all__ = [
    "Color",
    "Declaration",
    "parse_declarations",
    "CssColorProperty",
    "CssIntegerProperty",
    "CssStringProperty",
    "find_property",
    "Style",
    "StyleGenerator",
    "StyleMap",
    "StyleMapStats",
    "merge_styles",
    "StylesheetParser",
    "parse_stylesheet",
]
