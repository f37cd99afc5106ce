"""Whole-file convenience wrappers.

Each function performs one blocking read and/or one blocking write. There is no
temporary file or cleanup: if a write fails part way, the target is left in
whatever state the operating system leaves it. OSError is never wrapped.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any, Optional, Union

from .adapters.json_table import json_text_to_table, table_to_json_text
from .codec.decoder import decode
from .codec.encoder import encode
from .models.table import Table

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def write_rsv(table: Iterable[Sequence[Any]], path: PathLike, *, validate: bool = True) -> None:
    """Encode a table and write it to an RSV file.

    Args:
        table: Rows of str or None cells
        path: Destination file, created or truncated
        validate: If True, reject text whose bytes contain a reserved byte

    Raises:
        EncodeError: If the table cannot be encoded (nothing is written)
        OSError: If the file cannot be written
    """
    data = encode(table, validate=validate)
    Path(path).write_bytes(data)
    logger.debug("Wrote %d bytes of RSV to %s", len(data), path)


def read_rsv(path: PathLike) -> Table:
    """Read and decode an RSV file.

    Args:
        path: RSV file to read

    Returns:
        Decoded table

    Raises:
        OSError: If the file cannot be read
        InvalidTextError: If a value in the file is not valid UTF-8
    """
    data = Path(path).read_bytes()
    logger.debug("Read %d bytes of RSV from %s", len(data), path)
    return decode(data)


def json_file_to_rsv(json_path: PathLike, rsv_path: PathLike) -> None:
    """Convert a JSON file (array of arrays of string/null) to an RSV file.

    Raises:
        OSError: If either file cannot be accessed
        pydantic.ValidationError: If the JSON is malformed or has the wrong shape
        EncodeError: If the table cannot be encoded
    """
    text = Path(json_path).read_text(encoding="utf-8")
    logger.debug("Converting %s to %s", json_path, rsv_path)
    write_rsv(json_text_to_table(text), rsv_path)


def rsv_file_to_json(rsv_path: PathLike, json_path: PathLike, *, indent: Optional[int] = None) -> None:
    """Convert an RSV file to a JSON file.

    Args:
        rsv_path: RSV file to read
        json_path: Destination JSON file, created or truncated
        indent: Indentation for pretty-printing, or None for compact output

    Raises:
        OSError: If either file cannot be accessed
        InvalidTextError: If a value in the RSV file is not valid UTF-8
    """
    table = read_rsv(rsv_path)
    Path(json_path).write_text(table_to_json_text(table, indent=indent), encoding="utf-8")
    logger.debug("Wrote %d rows as JSON to %s", len(table), json_path)
