"""
Configuration for style resolution sessions.

A StyleMapConfig travels with one StyleMap (one document). Values can be
supplied directly, or read from the environment with ``from_env``:

    HTML_EXPORTER_INLINE_ERROR_POLICY   raise | wrap | skip
    HTML_EXPORTER_SIZING_ATTRIBUTE      attribute name, default ``width``
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Union

from .exceptions import ConfigurationError

ENV_INLINE_ERROR_POLICY = "HTML_EXPORTER_INLINE_ERROR_POLICY"
ENV_SIZING_ATTRIBUTE = "HTML_EXPORTER_SIZING_ATTRIBUTE"


class InlineErrorPolicy(str, Enum):
    """What happens when an element's ``style`` attribute cannot be parsed."""

    RAISE = "raise"  # parser error propagates unchanged
    WRAP = "wrap"  # StyleError naming the element, chained to the parser error
    SKIP = "skip"  # warning logged, inline contribution is empty

    @classmethod
    def parse(cls, value: Union[str, "InlineErrorPolicy"]) -> "InlineErrorPolicy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(policy.value for policy in cls)
            raise ConfigurationError(
                f"Invalid inline error policy {value!r}", details=f"expected one of {choices}"
            ) from None


@dataclass
class StyleMapConfig:
    """Options for a single resolution session."""

    sizing_attribute: str = "width"
    inline_error_policy: InlineErrorPolicy = InlineErrorPolicy.RAISE

    def __post_init__(self) -> None:
        self.inline_error_policy = InlineErrorPolicy.parse(self.inline_error_policy)
        if not self.sizing_attribute or not isinstance(self.sizing_attribute, str):
            raise ConfigurationError("sizing_attribute must be a non-empty string")
        self.sizing_attribute = self.sizing_attribute.strip().lower()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "StyleMapConfig":
        """
        Build a config from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)
            **overrides: Explicit values that take precedence over the environment

        Returns:
            StyleMapConfig instance
        """
        environ = os.environ if environ is None else environ
        values = {}
        if environ.get(ENV_INLINE_ERROR_POLICY):
            values["inline_error_policy"] = environ[ENV_INLINE_ERROR_POLICY]
        if environ.get(ENV_SIZING_ATTRIBUTE):
            values["sizing_attribute"] = environ[ENV_SIZING_ATTRIBUTE]
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
