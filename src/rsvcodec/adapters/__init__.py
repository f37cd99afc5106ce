"""Adapters between RSV tables and other representations."""

from __future__ import annotations

from .json_table import json_text_to_table, table_to_json_text

__all__ = [
    "table_to_json_text",
    "json_text_to_table",
]
