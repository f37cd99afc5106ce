"""Utility functions for rsvcodec.

This module provides size calculation helpers.
"""

from __future__ import annotations

from .sizing import encoded_size, row_size, row_sizes

__all__ = [
    "encoded_size",
    "row_size",
    "row_sizes",
]
