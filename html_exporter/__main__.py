"""
Entry point for running HTML Exporter as a module.

Usage:
    python -m html_exporter styles page.html
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
