"""RSV encoder.

This module provides the encode() function that converts a table of optional
strings into the RSV byte stream.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from ..exceptions import EncodeError, InvalidContentError
from .constants import EOR, EOV, NULL, RESERVED_BYTES


def encode(table: Iterable[Sequence[Any]], *, validate: bool = True) -> bytes:
    """Encode a table to RSV.

    Every cell is written as its UTF-8 bytes (or the NULL byte for None) followed
    by EOV, and every row is closed by EOR. An empty row therefore encodes to a
    single EOR byte and an empty table to no bytes at all.

    Args:
        table: Rows of cells, each cell a str or None
        validate: If True, reject text whose bytes contain a reserved byte

    Returns:
        RSV byte stream

    Raises:
        EncodeError: If a row or cell has an unsupported type
        InvalidContentError: If a text cell cannot be represented in RSV

    Examples:
        ```python
        from rsvcodec import encode

        data = encode([["A", None], []])
        assert data == b"A\\xff\\xfe\\xff\\xfd\\xfd"
        ```
    """
    buffer = bytearray()
    for row_index, row in enumerate(table):
        _encode_row_into(buffer, row, row_index, validate)
    return bytes(buffer)


def encode_row(row: Sequence[Any], *, validate: bool = True) -> bytes:
    """Encode a single row, including its trailing EOR byte.

    Args:
        row: Cells of the row
        validate: If True, reject text whose bytes contain a reserved byte

    Returns:
        RSV bytes for the row

    Raises:
        EncodeError: If a cell has an unsupported type
        InvalidContentError: If a text cell cannot be represented in RSV
    """
    buffer = bytearray()
    _encode_row_into(buffer, row, 0, validate)
    return bytes(buffer)


def _encode_row_into(buffer: bytearray, row: Sequence[Any], row_index: int, validate: bool) -> None:
    check_row(row, row_index)

    for column, cell in enumerate(row):
        if cell is None:
            buffer.append(NULL)
        elif isinstance(cell, str):
            buffer.extend(encode_text(cell, row_index, column, validate))
        else:
            raise EncodeError(
                f"Row {row_index}, column {column}: expected str or None, "
                f"got {type(cell).__name__}"
            )
        buffer.append(EOV)

    buffer.append(EOR)


def check_row(row: Any, row_index: int) -> None:
    """Ensure row is an ordered sequence of cells.

    Strings and bytes are sequences too but never rows. Sets and mappings are
    rejected since their iteration order would make the encoding unstable.

    Raises:
        EncodeError: If row is not a usable sequence
    """
    if isinstance(row, (str, bytes, bytearray)) or not isinstance(row, Sequence):
        raise EncodeError(f"Row {row_index}: expected a sequence of cells, got {type(row).__name__}")


def encode_text(value: str, row: int, column: int, validate: bool = True) -> bytes:
    """Encode a text cell to UTF-8.

    Raises:
        InvalidContentError: If the value cannot be encoded or holds a reserved byte
    """
    try:
        raw = value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidContentError(
            f"Row {row}, column {column}: text is not encodable as UTF-8: {e}", row, column
        ) from e

    if validate and not RESERVED_BYTES.isdisjoint(raw):
        raise InvalidContentError(
            f"Row {row}, column {column}: text contains a reserved RSV byte", row, column
        )

    return raw
