"""Table modeling for rsvcodec.

This module provides the Table/Row/Cell type aliases and pydantic-based
validation of tables coming from untrusted sources.
"""

from __future__ import annotations

from .table import TABLE_ADAPTER, Cell, Row, Table, validate_table

__all__ = [
    "Cell",
    "Row",
    "Table",
    "TABLE_ADAPTER",
    "validate_table",
]
