"""
Exceptions
==========

Error types raised by the markup helpers.
"""

from typing import Any


class MarkupHelperError(Exception):
    """Base exception for all markup helper failures."""

    pass


class AttributeLookupError(MarkupHelperError, AttributeError):
    """Exception raised when a record does not expose a requested attribute."""

    def __init__(self, record: Any, attribute: str) -> None:
        self.record_type = type(record).__name__
        self.attribute = attribute
        super().__init__(f"{self.record_type} has no attribute '{attribute}'")


class TagConstructionError(MarkupHelperError, ValueError):
    """Exception raised when a tag or attribute name is malformed."""

    pass


class BuilderStateError(MarkupHelperError, RuntimeError):
    """Exception raised when a builder is used after it has been rendered."""

    pass


class TemplateRenderError(MarkupHelperError):
    """Exception raised when template rendering fails."""

    pass
