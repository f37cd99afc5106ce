#!/usr/bin/env python3
"""Basic usage example for rsvcodec.

This example demonstrates:
1. Encoding a table to RSV
2. Inspecting the sentinel bytes
3. Decoding back to a table
4. Converting to JSON
"""

from __future__ import annotations

from rsvcodec import EOR, EOV, NULL, decode, encode, row_sizes, table_to_json_text


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("rsvcodec Basic Usage Example")
    print("=" * 60)
    print()

    table = [["A", "B", "Hello", "Word"], [], ["C", None, "D"]]

    print("1. Encoding table...")
    data = encode(table)
    print(f"   {len(data)} bytes, per row: {row_sizes(table)}")
    print()

    print("2. Byte stream:")
    names = {EOV: "EOV", EOR: "EOR", NULL: "NULL"}
    print("   " + " ".join(names.get(b, chr(b)) for b in data))
    print()

    print("3. Decoding...")
    decoded = decode(data)
    print(f"   Round-trip OK: {decoded == table}")
    print()

    print("4. As JSON:")
    print("   " + table_to_json_text(decoded))


if __name__ == "__main__":
    main()
