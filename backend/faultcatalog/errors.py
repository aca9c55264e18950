"""Exception hierarchy for faultcatalog."""

from __future__ import annotations


class FaultCatalogError(Exception):
    """Base exception for all faultcatalog errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(FaultCatalogError):
    """Settings could not be loaded or failed validation."""


class DomainValidationError(FaultCatalogError):
    """A caller-defined precondition did not hold.

    Classified as ``domain-specific``; the message is reported verbatim.
    """
