from __future__ import annotations

from typing import Optional


class CraftBeerError(Exception):
    """Base exception for craft beer parsing failures."""


class ResourceNotFound(CraftBeerError, FileNotFoundError):
    """Raised when a beer data resource cannot be located."""


class ReadFailure(CraftBeerError, OSError):
    """Raised when a beer data resource exists but cannot be read or decoded."""


class MalformedRecord(CraftBeerError, ValueError):
    """
    Raised when a composite beer line cannot be turned into a BeerRecord.

    Attributes:
        field: Name of the record field being extracted when parsing failed.
        separator: The separator that was searched for, or None when the
            failure was not a missing separator.
        record_number: 1-based position of the record in the file, if known.
        lineno: 1-based line number of the record's first raw line, if known.
        line: The composite line being parsed.
    """

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        separator: Optional[str] = None,
        line: Optional[str] = None,
        record_number: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.separator = separator
        self.line = line
        self.record_number = record_number

    @property
    def lineno(self) -> Optional[int]:
        if self.record_number is None:
            return None
        # three raw lines per record
        return (self.record_number - 1) * 3 + 1

    def __str__(self) -> str:
        if self.record_number is None:
            return self.message
        return f"Record {self.record_number} (line {self.lineno}): {self.message}"
