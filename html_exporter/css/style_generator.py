"""Translation of parsed declarations into typed Style values."""

from __future__ import annotations

import logging
import re
from typing import Any, Optional

import tinycss2

from .color import Color
from .declarations import Declaration
from .properties import (
    CssColorProperty,
    CssIntegerProperty,
    CssProperty,
    CssStringProperty,
    find_property,
)
from .style import Style

logger = logging.getLogger(__name__)

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+))")


class StyleGenerator:
    """Create single-declaration Styles, coercing values to each property's type."""

    BORDER_STYLES = frozenset({
        "none", "hidden", "dotted", "dashed", "solid", "double",
        "groove", "ridge", "inset", "outset",
    })

    def create_style(self, declaration: Declaration) -> Style:
        """
        Translate one declaration.

        Unsupported properties and unusable values produce an empty Style.
        The ``background`` and ``border`` shorthands may produce several
        properties.
        """
        if declaration.name == "background":
            return self._create_background_style(declaration.value)
        if declaration.name == "border":
            return self._create_border_style(declaration.value)

        key = find_property(declaration.name)
        if key is None:
            logger.debug("Ignoring unsupported property %r", declaration.name)
            return Style()

        value = self.convert_value(key, declaration.value)
        if value is None:
            logger.debug("Ignoring invalid value %r for %s", declaration.value, declaration.name)
            return Style()
        return Style({key: value})

    # ------------------------------------------------------------------
    def convert_value(self, key: CssProperty, raw: str) -> Optional[Any]:
        if isinstance(key, CssColorProperty):
            return Color.parse(raw)
        if isinstance(key, CssIntegerProperty):
            return self._parse_integer(raw)
        if key is CssStringProperty.FONT_FAMILY:
            family = raw.replace('"', "").replace("'", "").strip()
            return family or None
        text = " ".join(raw.split()).lower()
        return text or None

    @staticmethod
    def _parse_integer(raw: str) -> Optional[int]:
        match = _LEADING_NUMBER.match(raw)
        if match is None:
            return None
        return int(round(float(match.group(1))))

    # ------------------------------------------------------------------
    def _create_background_style(self, raw: str) -> Style:
        style = Style()
        for part in self._split_shorthand(raw):
            color = Color.parse(part)
            if color is not None:
                style.add_property(CssColorProperty.BACKGROUND_COLOR, color)
        return style

    def _create_border_style(self, raw: str) -> Style:
        style = Style()
        for part in self._split_shorthand(raw):
            lowered = part.lower()
            if lowered in self.BORDER_STYLES:
                style.add_property(CssStringProperty.BORDER_STYLE, lowered)
                continue
            color = Color.parse(part)
            if color is not None:
                style.add_property(CssColorProperty.BORDER_COLOR, color)
            else:
                style.add_property(CssStringProperty.BORDER_WIDTH, lowered)
        return style

    @staticmethod
    def _split_shorthand(raw: str):
        tokens = tinycss2.parse_component_value_list(raw, skip_comments=True)
        return [tinycss2.serialize([token]).strip() for token in tokens if token.type != "whitespace"]
