"""Encoded size calculation utilities.

This module provides functions to calculate the RSV size of a table
without actually encoding it.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from ..codec.encoder import check_row, encode_text
from ..exceptions import EncodeError


def row_size(row: Sequence[Any]) -> int:
    """Calculate the encoded size of a single row in bytes.

    Each cell costs its UTF-8 length (or 1 for the NULL marker) plus one EOV,
    and the row costs one EOR.

    Raises:
        EncodeError: If row is not a sequence or a cell is neither str nor None
        InvalidContentError: If a text cell cannot be encoded

    Example:
        >>> row_size(["Hello", None, ""])
        10  # 5 + 1 + 1 + 1 + 0 + 1 + 1
    """
    return _row_size(row, 0)


def _row_size(row: Sequence[Any], row_index: int) -> int:
    check_row(row, row_index)

    size = 1  # EOR
    for column, cell in enumerate(row):
        if cell is None:
            size += 2
        elif isinstance(cell, str):
            size += len(encode_text(cell, row_index, column)) + 1
        else:
            raise EncodeError(
                f"Row {row_index}, column {column}: expected str or None, "
                f"got {type(cell).__name__}"
            )
    return size


def row_sizes(table: Iterable[Sequence[Any]]) -> list[int]:
    """Get the encoded size in bytes of each row in a table.

    Example:
        >>> row_sizes([["A", "B"], [], ["C", None]])
        [5, 1, 5]
    """
    return [_row_size(row, row_index) for row_index, row in enumerate(table)]


def encoded_size(table: Iterable[Sequence[Any]]) -> int:
    """Calculate the encoded size of a table in bytes.

    Matches len(encode(table)) for any table encode() accepts.

    Example:
        >>> encoded_size([])
        0
        >>> encoded_size([[]])
        1
    """
    return sum(row_sizes(table))
