"""Table data model.

A table is a list of rows, a row is a list of cells and a cell is either a
string or None. Plain lists are used throughout so decoded tables compare equal
to literals written by hand.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import ConfigDict, TypeAdapter

Cell = Optional[str]
Row = List[Cell]
Table = List[Row]

# Strict mode: a cell must already be a str or None, numbers are not coerced.
TABLE_ADAPTER: TypeAdapter[Table] = TypeAdapter(Table, config=ConfigDict(strict=True))


def validate_table(obj: Any) -> Table:
    """Validate an arbitrary Python object as a table.

    Any sequence of sequences of ``str | None`` is accepted; the result is a
    fresh list of lists, so the caller's object is never shared or mutated.

    Args:
        obj: Candidate table (e.g. a list of tuples)

    Returns:
        The table as a list of lists

    Raises:
        pydantic.ValidationError: If obj is not a table of optional strings

    Example:
        >>> validate_table((("a", None),))
        [['a', None]]
    """
    # Strict mode rejects tuples for list fields, so normalise the containers first.
    if isinstance(obj, (list, tuple)):
        obj = [list(row) if isinstance(row, (list, tuple)) else row for row in obj]
    return TABLE_ADAPTER.validate_python(obj)
