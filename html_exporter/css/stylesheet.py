"""
Stylesheet parser producing the selector -> Style rule table.

Syntax example:
    td { font-weight: normal; }
    .total, th { font-weight: bold; }
    td.negative { color: red; }

Only tag, ``.class`` and ``tag.class`` selectors are kept. Everything else
(ids, combinators, pseudo-classes, at-rules) is skipped.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional

import tinycss2

from .declarations import parse_declarations
from .style import Style
from .style_generator import StyleGenerator
from .style_merger import merge_styles

logger = logging.getLogger(__name__)

# tag | .class | tag.class
_SELECTOR_RE = re.compile(
    r"""
    ^(?:
        [a-z][a-z0-9-]*                      # tag
      | \.[_a-z][_a-z0-9-]*                  # .class
      | [a-z][a-z0-9-]*\.[_a-z][_a-z0-9-]*   # tag.class
    )$
    """,
    re.VERBOSE,
)


class StylesheetParser:
    """Parse CSS text into a rule table keyed by lowercased selector."""

    def __init__(self, generator: Optional[StyleGenerator] = None) -> None:
        self.generator = generator or StyleGenerator()

    def parse(self, css_text: str) -> Dict[str, Style]:
        """
        Parse a stylesheet.

        When a selector appears in several rules the later declarations win.

        Args:
            css_text: Stylesheet source

        Returns:
            Dictionary mapping selector to Style
        """
        rules: Dict[str, Style] = {}
        if not css_text or not css_text.strip():
            return rules

        for rule in tinycss2.parse_stylesheet(css_text, skip_comments=True, skip_whitespace=True):
            if rule.type == "error":
                logger.warning("Skipping invalid stylesheet rule at line %s: %s", rule.source_line, rule.message)
                continue
            if rule.type == "at-rule":
                logger.debug("Skipping @%s rule at line %s", rule.lower_at_keyword, rule.source_line)
                continue

            selectors = self.parse_selectors(tinycss2.serialize(rule.prelude))
            if not selectors:
                continue

            declarations = parse_declarations(rule.content or [], strict=False)
            style = merge_styles(*(self.generator.create_style(decl) for decl in declarations))
            for selector in selectors:
                rules[selector] = merge_styles(rules.get(selector), style)

        logger.debug("Parsed %d stylesheet selectors", len(rules))
        return rules

    @staticmethod
    def parse_selectors(prelude: str) -> List[str]:
        """Split a selector list, keeping only supported selectors."""
        selectors = []
        for raw in prelude.split(","):
            selector = raw.strip().lower()
            if _SELECTOR_RE.match(selector):
                selectors.append(selector)
            elif selector:
                logger.debug("Skipping unsupported selector %r", selector)
        return selectors


def parse_stylesheet(css_text: str, generator: Optional[StyleGenerator] = None) -> Dict[str, Style]:
    return StylesheetParser(generator).parse(css_text)
