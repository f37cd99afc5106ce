"""rsvcodec: Rows of Strings and Values codec

A Python library for the RSV binary table format. RSV stores a table of optional
strings using three bytes that never occur in UTF-8 as delimiters:

- 0xFF (EOV) terminates every value
- 0xFD (EOR) terminates every row
- 0xFE (NULL) marks a value as absent rather than empty

Key Features:
- Byte-exact encode/decode of tables of ``str | None``
- Explicit, independently testable decoder state machine
- JSON array-of-arrays conversion via pydantic
- Whole-file convenience wrappers

Quick Start:
    >>> from rsvcodec import encode, decode
    >>>
    >>> table = [["Hello", "🌎"], [], [None, ""]]
    >>> data = encode(table)
    >>> decode(data) == table
    True
"""

from __future__ import annotations

from .adapters import json_text_to_table, table_to_json_text
from .codec import EOR, EOV, NULL, RESERVED_BYTES, DecoderState, decode, encode, encode_row, iter_decode
from .exceptions import DecodeError, EncodeError, InvalidContentError, InvalidTextError, RsvError
from .fileio import json_file_to_rsv, read_rsv, rsv_file_to_json, write_rsv
from .models import Cell, Row, Table, validate_table
from .utils import encoded_size, row_size, row_sizes

__version__ = "0.1.0"

# Operation names used by other RSV implementations
encode_table_to_bytes = encode
decode_bytes_to_table = decode

__all__ = [
    # Core API
    "encode",
    "encode_row",
    "decode",
    "iter_decode",
    "encode_table_to_bytes",
    "decode_bytes_to_table",
    "DecoderState",
    # Format constants
    "EOV",
    "EOR",
    "NULL",
    "RESERVED_BYTES",
    # Data model
    "Cell",
    "Row",
    "Table",
    "validate_table",
    # Exceptions
    "RsvError",
    "EncodeError",
    "InvalidContentError",
    "DecodeError",
    "InvalidTextError",
    # JSON
    "table_to_json_text",
    "json_text_to_table",
    # Files
    "write_rsv",
    "read_rsv",
    "json_file_to_rsv",
    "rsv_file_to_json",
    # Sizing
    "encoded_size",
    "row_size",
    "row_sizes",
    # Version
    "__version__",
]
