"""Custom exceptions for HTML Exporter."""

from typing import Optional


class HtmlExporterError(Exception):
    """Base exception for HTML Exporter errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ParsingError(HtmlExporterError):
    """Exception raised when CSS or HTML text cannot be parsed."""

    pass


class StyleError(HtmlExporterError):
    """Exception raised during style construction or resolution."""

    pass


class ConfigurationError(HtmlExporterError):
    """Exception raised for invalid configuration values."""

    pass
