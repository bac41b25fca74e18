"""Helpers for reading lxml/ElementTree-style elements."""

from __future__ import annotations

from typing import Any


def tag_name(element: Any) -> str:
    """Return the lowercased local tag name, or "" for comments and PIs."""
    tag = element.tag
    if not isinstance(tag, str):
        return ""
    if tag.startswith("{"):
        tag = tag.rpartition("}")[2]
    return tag.lower()


def is_element(node: Any) -> bool:
    return isinstance(getattr(node, "tag", None), str)


def describe_element(element: Any) -> str:
    """Short human readable label such as ``<div class="a b"> (line 12)``."""
    label = f"<{tag_name(element) or '?'}"
    class_name = element.get("class")
    if class_name:
        label += f' class="{class_name}"'
    label += ">"
    line = getattr(element, "sourceline", None)
    if line is not None:
        label += f" (line {line})"
    return label
