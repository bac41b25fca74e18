"""
HTML Exporter - effective style resolution for HTML element trees.

Computes, for each element of an HTML document, the single style that
results from cascading tag rules, class rules, inline declarations and
inherited ancestor style. Results are memoized per document so that
resolving every element of a large page stays cheap.

Quick Start:
    from html_exporter import HtmlDocument

    document = HtmlDocument.from_file("report.html")
    for element, style in document.iter_styles():
        print(element.tag, style.is_bold(), style.background_color())
"""

from .version import __version__, __version_info__

from .exceptions import (
    HtmlExporterError,
    ParsingError,
    StyleError,
    ConfigurationError,
)
from .config import InlineErrorPolicy, StyleMapConfig
from .css import (
    Color,
    CssColorProperty,
    CssIntegerProperty,
    CssStringProperty,
    Declaration,
    Style,
    StyleGenerator,
    StyleMap,
    StylesheetParser,
    merge_styles,
    parse_declarations,
    parse_stylesheet,
)
from .document import HtmlDocument

__all__ = [
    # Version
    "__version__",
    "__version_info__",

    # Documents
    "HtmlDocument",

    # Style resolution
    "StyleMap",
    "StyleMapConfig",
    "InlineErrorPolicy",
    "Style",
    "merge_styles",
    "Color",
    "CssColorProperty",
    "CssIntegerProperty",
    "CssStringProperty",

    # Parsing
    "Declaration",
    "parse_declarations",
    "StyleGenerator",
    "StylesheetParser",
    "parse_stylesheet",

    # Exceptions
    "HtmlExporterError",
    "ParsingError",
    "StyleError",
    "ConfigurationError",
]
