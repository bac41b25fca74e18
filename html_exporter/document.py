"""
HTML document wrapper.

Loads an HTML page with lxml, builds the rule table from its ``<style>``
elements and owns the document's single StyleMap resolution session.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Tuple, Union

import lxml.etree
import lxml.html

from .config import StyleMapConfig
from .css.style import Style
from .css.style_generator import StyleGenerator
from .css.style_map import StyleMap
from .css.stylesheet import StylesheetParser
from .exceptions import ParsingError

logger = logging.getLogger(__name__)


class HtmlDocument:
    """
    An HTML document together with its style resolution session.

    Each document gets its own StyleMap, so cached styles never leak between
    documents whose stylesheets differ.
    """

    def __init__(self, root: Any, config: Optional[StyleMapConfig] = None,
                 generator: Optional[StyleGenerator] = None) -> None:
        """
        Initialize document.

        Args:
            root: Root element of a parsed lxml tree
            config: Resolution options for this document
            generator: Declaration translator shared by stylesheet and inline styles
        """
        self.root = root
        self.config = config or StyleMapConfig()
        generator = generator or StyleGenerator()

        self.rules: Dict[str, Style] = StylesheetParser(generator).parse(self.stylesheet_text())
        self.style_map = StyleMap(self.rules, config=self.config, generator=generator)
        logger.info("Loaded document with %d style rules", len(self.rules))

    @classmethod
    def from_string(cls, html: Union[str, bytes],
                    config: Optional[StyleMapConfig] = None) -> "HtmlDocument":
        """
        Load a document from markup.

        Bytes are decoded by lxml using the charset the page declares in a
        ``<meta>`` tag or XML declaration.
        """
        if not html or not html.strip():
            raise ParsingError("Cannot load an empty HTML document")
        try:
            root = lxml.html.document_fromstring(html)
        except (lxml.etree.LxmlError, ValueError) as exc:
            raise ParsingError("Cannot parse HTML document", details=str(exc)) from exc
        return cls(root, config=config)

    @classmethod
    def from_file(cls, path: Union[str, Path], config: Optional[StyleMapConfig] = None) -> "HtmlDocument":
        path = Path(path)
        logger.debug("Reading %s", path)
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise ParsingError(f"Cannot read {path}", details=str(exc)) from exc
        return cls.from_string(data, config=config)

    # ------------------------------------------------------------------
    @property
    def body(self) -> Any:
        body = self.root.find(".//body")
        return body if body is not None else self.root

    def stylesheet_text(self) -> str:
        """Concatenated text of all ``<style>`` elements in document order."""
        return "\n".join(element.text or "" for element in self.root.iter("style"))

    def style_for(self, element: Any) -> Style:
        return self.style_map.get_style_for_element(element)

    def iter_styles(self, root: Optional[Any] = None) -> Iterator[Tuple[Any, Style]]:
        """Yield ``(element, style)`` for the body (or ``root``) subtree."""
        return self.style_map.iter_styles(self.body if root is None else root)

    def element_path(self, element: Any) -> str:
        """Location of ``element`` relative to the document, e.g. ``html/body/div[2]``."""
        return self.root.getroottree().getpath(element).lstrip("/")
