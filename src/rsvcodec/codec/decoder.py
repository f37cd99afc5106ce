"""RSV decoder.

This module provides the decode() function that parses an RSV byte stream back
into a table. Parsing is a single forward pass of an explicit state machine:

    byte   | effect
    -------+---------------------------------------------------------------
    EOV    | pending null: clear the flag and drop the accumulator
           | otherwise: emit the accumulator as a text cell
    EOR    | close the current row and drop the accumulator; a pending null
           | stays pending across the row boundary
    NULL   | emit a None cell and mark it pending until the next EOV
    other  | append to the accumulator

A row that is never closed by EOR is not part of the result. Every byte stream
has a defined parse; the only failure is a text value that is not valid UTF-8.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional

from ..exceptions import InvalidTextError
from ..models.table import Row, Table
from .constants import EOR, EOV, NULL


@dataclass
class DecoderState:
    """Mutable state of the RSV decoder.

    Attributes:
        row: Cells of the row currently being built
        accumulator: Bytes of the value currently being scanned
        pending_null: True if the last emitted cell was None and its EOV is still due
        offset: Number of bytes consumed so far
    """

    row: Row = field(default_factory=list)
    accumulator: bytearray = field(default_factory=bytearray)
    pending_null: bool = False
    offset: int = 0


def step(state: DecoderState, byte: int) -> Optional[Row]:
    """Apply one input byte to the decoder state.

    Args:
        state: Decoder state, updated in place
        byte: Next input byte (0-255)

    Returns:
        The completed row if byte closed one, otherwise None

    Raises:
        InvalidTextError: If a completed text value is not valid UTF-8
    """
    completed: Optional[Row] = None

    if byte == EOV:
        if state.pending_null:
            state.pending_null = False
        else:
            state.row.append(_decode_text(state.accumulator, state.offset))
        state.accumulator.clear()
    elif byte == EOR:
        completed = state.row
        state.row = []
        state.accumulator.clear()
    elif byte == NULL:
        state.row.append(None)
        state.pending_null = True
    else:
        state.accumulator.append(byte)

    state.offset += 1
    return completed


def iter_decode(data: bytes) -> Iterator[Row]:
    """Decode RSV data lazily, yielding each row once its EOR is reached.

    Args:
        data: RSV byte stream (bytes, bytearray or memoryview)

    Yields:
        Rows in stream order

    Raises:
        InvalidTextError: If a text value is not valid UTF-8
    """
    state = DecoderState()
    for byte in bytes(data):
        row = step(state, byte)
        if row is not None:
            yield row
    # Whatever is left in state.row was never terminated and is dropped.


def decode(data: bytes) -> Table:
    """Decode RSV data to a table.

    Args:
        data: RSV byte stream

    Returns:
        Table of rows, each a list of str or None

    Raises:
        InvalidTextError: If a text value is not valid UTF-8

    Examples:
        ```python
        from rsvcodec import decode

        table = decode(b"Hello\\xff\\xfd\\xfd\\xfe\\xff\\xff\\xfd")
        assert table == [["Hello"], [], [None, ""]]
        ```
    """
    return list(iter_decode(data))


def _decode_text(raw: bytearray, offset: int) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidTextError(
            f"Value ending at byte {offset}: invalid UTF-8 encoding: {e}", offset
        ) from e
