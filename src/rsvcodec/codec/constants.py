"""Reserved bytes of the RSV format.

None of these bytes can appear in well-formed UTF-8, which is what lets RSV
store text without escaping.
"""

from __future__ import annotations

EOV = 0xFF  # End-Of-Value
EOR = 0xFD  # End-Of-Row
NULL = 0xFE  # Null value marker

RESERVED_BYTES = frozenset({EOV, EOR, NULL})
