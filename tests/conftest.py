"""
Pytest configuration for html_exporter
"""

import pytest
import logging
import sys

import lxml.etree

from html_exporter.css.color import BLUE, RED
from html_exporter.css.properties import CssColorProperty, CssStringProperty
from html_exporter.css.style import Style


def pytest_collection_modifyitems(config, items):
    """Mark every test as unit, and deep-tree tests as slow."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
        if "deep" in item.name:
            item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid handler leaks between tests."""
    # Clear all existing handlers
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    
    # Set up console-only logging for tests
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)  # Only show warnings and errors during tests
    
    formatter = logging.Formatter(
        '%(name)s - %(levelname)s - %(message)s'
    )
    console_handler.setFormatter(formatter)
    
    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)
    
    yield
    
    # Cleanup after test
    root_logger.handlers.clear()


@pytest.fixture
def make_element():
    """Build an lxml element tree from markup and return its root."""
    def _make(markup: str):
        return lxml.etree.fromstring(markup)
    return _make


@pytest.fixture
def cascade_rules():
    """Rule table used by the cascade scenarios."""
    return {
        "div": Style({
            CssStringProperty.FONT_WEIGHT: Style.BOLD_FONT_STYLE,
            CssColorProperty.BACKGROUND_COLOR: RED,
        }),
        ".highlight": Style({CssStringProperty.BORDER_WIDTH: "thin"}),
        "div.highlight": Style({CssColorProperty.BACKGROUND_COLOR: BLUE}),
    }


@pytest.fixture
def sample_html():
    """Small HTML page with a stylesheet and inline styles."""
    return """
    <!DOCTYPE html>
    <html>
    <head>
        <style>
            body { color: #333333; font-size: 10px }
            td { text-align: left }
            .total { font-weight: bold }
            td.total { text-align: right }
            #ignored { color: red }
        </style>
    </head>
    <body>
        <table width="100%">
            <tr><td>Item</td><td class="total" style="color: red">42</td></tr>
            <tr><td>Item</td><td class="total" style="color: red">43</td></tr>
        </table>
        <!-- comment -->
        <p style="font-size: 14px">Footer</p>
    </body>
    </html>
    """
