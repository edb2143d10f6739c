"""
Catalog Errors

Error taxonomy shared by records, the loader and commands.
"""

from __future__ import annotations

from typing import Optional


class CatalogError(Exception):
    """Base class for catalog failures."""


class NullInputError(CatalogError, TypeError):
    """Raised when a required argument, store or parsed field is None."""


class ValidationError(CatalogError, ValueError):
    """Raised when argument text or a record field is out of domain."""


class SourceReadError(CatalogError, OSError):
    """Raised when a record source cannot be read."""


class DecodeFieldError(ValidationError):
    """Raised when one row of a record source cannot be decoded."""

    def __init__(self, line_number: int, reason: str, line: Optional[str] = None) -> None:
        self.line_number = line_number
        self.reason = reason
        self.line = line
        super().__init__(f"Line {line_number}: {reason}")
