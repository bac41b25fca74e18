"""
Declaration list parsing.

Turns the text of a ``style`` attribute (or the body of a stylesheet rule)
into an ordered list of property/value declarations using tinycss2.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Union

import tinycss2
import tinycss2.ast

from ..exceptions import ParsingError

logger = logging.getLogger(__name__)

DeclarationSource = Union[str, Iterable[tinycss2.ast.Node]]


@dataclass(frozen=True)
class Declaration:
    """One ``name: value`` pair, in source order."""

    name: str
    value: str
    important: bool = False


def parse_declarations(source: DeclarationSource, strict: bool = True) -> List[Declaration]:
    """
    Parse a CSS declaration list.

    Args:
        source: Raw text such as ``"color: red; font-size: 12px"`` or the
            component values of a rule block
        strict: Raise on malformed input instead of skipping it

    Returns:
        Declarations in the order they appear

    Raises:
        ParsingError: If ``strict`` and the input contains anything other
            than declarations, whitespace and comments
    """
    if isinstance(source, str) and not source.strip():
        return []

    declarations: List[Declaration] = []
    for node in tinycss2.parse_blocks_contents(source, skip_comments=True, skip_whitespace=True):
        if node.type == "declaration":
            value = tinycss2.serialize(node.value).strip()
            declarations.append(Declaration(node.lower_name, value, bool(node.important)))
            continue

        if node.type == "error":
            problem = f"{node.message} (line {node.source_line}, column {node.source_column})"
        else:
            problem = f"unexpected {node.type} at line {node.source_line}, column {node.source_column}"

        if strict:
            raw = source if isinstance(source, str) else tinycss2.serialize(source)
            raise ParsingError(f"Invalid CSS declaration list: {problem}", details=repr(raw))
        logger.debug("Skipping invalid declaration: %s", problem)

    return declarations
