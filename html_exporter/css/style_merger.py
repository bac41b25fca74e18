"""Style merging: later styles override earlier ones property by property."""

from __future__ import annotations

from typing import Optional

from .style import Style


def merge_styles(*styles: Optional[Style]) -> Style:
    """
    Merge styles given in increasing priority order.

    For each property the value of the last style defining it wins;
    properties defined by a single style pass through unchanged. ``None``
    entries are ignored and no arguments yields an empty Style. The inputs
    are never modified.

    Args:
        *styles: Styles, lowest priority first

    Returns:
        A new Style holding the merged properties
    """
    merged = Style()
    for style in styles:
        if style:
            for key, value in style.items():
                merged._properties[key] = value
    return merged
