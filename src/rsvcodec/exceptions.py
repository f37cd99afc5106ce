"""Exception hierarchy for rsvcodec.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from RsvError for easy catching of any rsvcodec-specific error.

File errors surface as the builtin OSError family and malformed JSON surfaces as
pydantic's ValidationError; neither is wrapped.
"""

from __future__ import annotations


class RsvError(Exception):
    """Base exception for all rsvcodec errors."""

    pass


class EncodeError(RsvError):
    """Raised when encoding a table fails.

    Examples:
        - A cell is neither a string nor None
        - A row is not a sequence of cells
    """

    pass


class InvalidContentError(EncodeError):
    """Raised when a text cell cannot be represented in RSV.

    RSV has no escape mechanism, so a value whose UTF-8 bytes contain one of the
    reserved bytes (0xFF, 0xFE, 0xFD) or which cannot be encoded to UTF-8 at all
    is rejected.
    """

    def __init__(self, message: str, row: int, column: int) -> None:
        super().__init__(message)
        self.row = row
        self.column = column


class DecodeError(RsvError):
    """Raised when decoding RSV data fails."""

    pass


class InvalidTextError(DecodeError):
    """Raised when the bytes of a decoded value are not valid UTF-8.

    Attributes:
        offset: Position of the EOV byte that terminated the offending value
    """

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(message)
        self.offset = offset
