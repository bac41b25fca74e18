"""Test suite for the html_exporter package."""
