"""Conversion between tables and JSON text.

The JSON form is an array of arrays whose items are strings or null. The mapping
is purely structural; parsing and validation go through pydantic so malformed
input surfaces as pydantic.ValidationError.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Optional, Union

from ..models.table import TABLE_ADAPTER, Table, validate_table


def table_to_json_text(table: Iterable[Sequence[Any]], *, indent: Optional[int] = None) -> str:
    """Serialize a table to JSON text.

    Args:
        table: Rows of str or None cells
        indent: Indentation for pretty-printing, or None for compact output

    Returns:
        JSON text, e.g. ``[["a",null],[]]``

    Raises:
        pydantic.ValidationError: If table contains something other than str/None cells
    """
    rows = validate_table(list(table))
    return TABLE_ADAPTER.dump_json(rows, indent=indent).decode("utf-8")


def json_text_to_table(text: Union[str, bytes]) -> Table:
    """Parse JSON text into a table.

    Args:
        text: JSON text (str, or UTF-8 encoded bytes)

    Returns:
        Table of rows

    Raises:
        pydantic.ValidationError: If the text is not valid JSON or not an array of
            arrays of strings/nulls
    """
    return TABLE_ADAPTER.validate_json(text)
