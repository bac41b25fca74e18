"""
Style resolution for HTML elements.

A StyleMap is one resolution session: it binds a read-only rule table to
two caches and computes the effective style of elements by cascading, from
lowest to highest priority:

    parent's resolved style < tag rule < .class rule < tag.class rule < inline style

Resolved styles are cached under a fingerprint of everything that can affect
them: tag, class attribute, inline style, sizing attribute and the parent's
fingerprint. Fingerprints are interned composite keys, so structurally equal
elements share cache entries and distinct ones never collide. A StyleMap
must not be reused across documents with different rule tables.
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import Any, Callable, Dict, Iterator, List, Mapping, NamedTuple, Optional, Sequence, Tuple

from ..config import InlineErrorPolicy, StyleMapConfig
from ..exceptions import StyleError
from ..utils.elements import describe_element, is_element, tag_name
from .declarations import Declaration, parse_declarations
from .style import Style
from .style_generator import StyleGenerator
from .style_merger import merge_styles

logger = logging.getLogger(__name__)

DeclarationParser = Callable[[str], Sequence[Declaration]]

# (tag, class text, inline text, sizing text, parent fingerprint)
ElementKey = Tuple[str, Optional[str], Optional[str], Optional[str], int]

NO_PARENT = 0


class StyleMapStats(NamedTuple):
    resolved: int
    fingerprints: int
    inline: int


class StyleMap:
    """Resolve and memoize effective styles for elements of one document."""

    CLASS_PREFIX = "."

    def __init__(
        self,
        styles: Optional[Mapping[str, Style]] = None,
        config: Optional[StyleMapConfig] = None,
        parser: Optional[DeclarationParser] = None,
        generator: Optional[StyleGenerator] = None,
    ) -> None:
        """
        Initialize a resolution session.

        Args:
            styles: Rule table mapping ``tag``, ``.class`` and ``tag.class``
                selectors to Styles. Held by reference and never modified.
            config: Session options
            parser: Inline declaration parser, ``parse_declarations`` by default
            generator: Declaration translator, ``StyleGenerator`` by default
        """
        self._styles: Mapping[str, Style] = styles if styles is not None else {}
        self.config = config or StyleMapConfig()
        self._parse = parser or parse_declarations
        self._generator = generator or StyleGenerator()

        self._fingerprints: Dict[ElementKey, int] = {}
        self._cache: Dict[int, Style] = {}
        self._inline_cache: Dict[str, Style] = {}
        self._lock = RLock()

        logger.debug("Style map created with %d rules", len(self._styles))

    @property
    def styles(self) -> Mapping[str, Style]:
        return self._styles

    def cache_info(self) -> StyleMapStats:
        return StyleMapStats(len(self._cache), len(self._fingerprints), len(self._inline_cache))

    # ------------------------------------------------------------------
    def get_style_for_element(self, element: Any) -> Style:
        """
        Return the effective style of an element.

        Ancestors are resolved top-down with an explicit walk, reusing any
        cached ancestor styles, so deep trees never recurse.

        Args:
            element: lxml/ElementTree-style element

        Returns:
            The cached or newly merged Style

        Raises:
            ParsingError: Malformed inline style under the RAISE policy
            StyleError: Malformed inline style under the WRAP policy
        """
        return self._resolve_chain(element)[1]

    def fingerprint(self, element: Any) -> int:
        """Return the interned cache key of an element (and its ancestor chain)."""
        with self._lock:
            fingerprint = NO_PARENT
            for node in self._ancestor_chain(element):
                fingerprint = self._intern(node, fingerprint)
            return fingerprint

    def iter_styles(self, root: Any) -> Iterator[Tuple[Any, Style]]:
        """
        Yield ``(element, style)`` for ``root`` and its descendants in
        document order. Comments and processing instructions are skipped.
        """
        parent = root.getparent()
        fingerprint, style = (NO_PARENT, None) if parent is None else self._resolve_chain(parent)

        stack: List[Tuple[Any, int, Optional[Style]]] = [(root, fingerprint, style)]
        while stack:
            node, parent_fingerprint, parent_style = stack.pop()
            with self._lock:
                node_fingerprint, node_style = self._resolve(node, parent_fingerprint, parent_style)
            yield node, node_style
            children = [child for child in node if is_element(child)]
            stack.extend((child, node_fingerprint, node_style) for child in reversed(children))

    # ------------------------------------------------------------------
    def resolve_inline(self, element: Any) -> Style:
        """
        Return the merged style of the element's ``style`` attribute.

        Elements without the attribute get an empty Style. Results are
        cached by raw attribute text, independent of the element. Text that
        fails to parse is never cached; under SKIP it is reported each time
        a distinct fingerprint is resolved.
        """
        raw = element.get("style")
        if raw is None:
            return Style()

        with self._lock:
            cached = self._inline_cache.get(raw)
            if cached is not None:
                return cached

            try:
                declarations = self._parse(raw)
            except Exception as exc:
                policy = self.config.inline_error_policy
                if policy is InlineErrorPolicy.RAISE:
                    raise
                if policy is InlineErrorPolicy.WRAP:
                    raise StyleError(
                        f"Invalid inline style on {describe_element(element)}", details=repr(raw)
                    ) from exc
                logger.warning("Ignoring invalid inline style on %s: %s", describe_element(element), exc)
                return Style()

            style = merge_styles(*(self._generator.create_style(decl) for decl in declarations))
            self._inline_cache[raw] = style
            return style

    # ------------------------------------------------------------------
    def _resolve_chain(self, element: Any) -> Tuple[int, Style]:
        with self._lock:
            fingerprint, style = NO_PARENT, None
            for node in self._ancestor_chain(element):
                fingerprint, style = self._resolve(node, fingerprint, style)
            return fingerprint, style

    def _resolve(self, element: Any, parent_fingerprint: int,
                 parent_style: Optional[Style]) -> Tuple[int, Style]:
        fingerprint = self._intern(element, parent_fingerprint)
        cached = self._cache.get(fingerprint)
        if cached is not None:
            return fingerprint, cached

        style = merge_styles(*self._get_all_styles(element, parent_style))
        self._cache[fingerprint] = style
        return fingerprint, style

    def _get_all_styles(self, element: Any, parent_style: Optional[Style]) -> List[Style]:
        styles: List[Style] = []
        if parent_style is not None:
            styles.append(parent_style)

        tag = tag_name(element)
        tag_style = self._styles.get(tag)
        if tag_style is not None:
            styles.append(tag_style)

        styles.extend(self._get_styles_for_class(element, tag))

        if element.get("style") is not None:
            styles.append(self.resolve_inline(element))
        return styles

    def _get_styles_for_class(self, element: Any, tag: str) -> List[Style]:
        class_styles: List[Style] = []
        for class_name in (element.get("class") or "").split():
            class_name = class_name.strip().lower()
            for selector in (self.CLASS_PREFIX + class_name, tag + self.CLASS_PREFIX + class_name):
                style = self._styles.get(selector)
                if style is not None:
                    class_styles.append(style)
        return class_styles

    def _intern(self, element: Any, parent_fingerprint: int) -> int:
        key: ElementKey = (
            tag_name(element),
            element.get("class"),
            element.get("style"),
            element.get(self.config.sizing_attribute),
            parent_fingerprint,
        )
        fingerprint = self._fingerprints.get(key)
        if fingerprint is None:
            fingerprint = len(self._fingerprints) + 1
            self._fingerprints[key] = fingerprint
        return fingerprint

    @staticmethod
    def _ancestor_chain(element: Any) -> List[Any]:
        chain = []
        node = element
        while node is not None:
            chain.append(node)
            node = node.getparent()
        chain.reverse()
        return chain
