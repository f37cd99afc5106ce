"""RSV binary codec for rsvcodec.

This module provides encoding and decoding between tables of optional strings
and the sentinel-delimited RSV byte format.
"""

from __future__ import annotations

from .constants import EOR, EOV, NULL, RESERVED_BYTES
from .decoder import DecoderState, decode, iter_decode, step
from .encoder import encode, encode_row

__all__ = [
    "encode",
    "encode_row",
    "decode",
    "iter_decode",
    "step",
    "DecoderState",
    "EOV",
    "EOR",
    "NULL",
    "RESERVED_BYTES",
]
