"""
Utility helpers for HTML Exporter.

Logging configuration and element introspection shared by the
css, document and cli modules.
"""

from .elements import describe_element, tag_name
from .logger import configure_logging, get_logger, set_log_level

__all__ = [
    "describe_element",
    "tag_name",
    "configure_logging",
    "get_logger",
    "set_log_level",
]
