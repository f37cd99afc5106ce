"""Unit tests for the whole-file wrappers."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from rsvcodec import EncodeError, InvalidTextError, json_file_to_rsv, read_rsv, rsv_file_to_json, write_rsv


class TestRsvFiles:
    """Test reading and writing RSV files."""

    def test_write_rsv(self, tmp_path: Path, sample_table: list, sample_rsv: bytes) -> None:
        """Test write_rsv writes the exact encoding."""
        path = tmp_path / "table.rsv"
        write_rsv(sample_table, path)
        assert path.read_bytes() == sample_rsv

    def test_read_rsv(self, tmp_path: Path, unicode_rsv: bytes) -> None:
        """Test read_rsv decodes a file."""
        path = tmp_path / "table.rsv"
        path.write_bytes(unicode_rsv)
        assert read_rsv(path) == [["Hello", "🌎"], [], [None, ""]]

    def test_str_paths(self, tmp_path: Path, sample_table: list) -> None:
        """Test plain string paths are accepted."""
        path = str(tmp_path / "table.rsv")
        write_rsv(sample_table, path)
        assert read_rsv(path) == sample_table

    def test_overwrites_existing(self, tmp_path: Path) -> None:
        """Test an existing file is truncated."""
        path = tmp_path / "table.rsv"
        path.write_bytes(b"x" * 100)
        write_rsv([[]], path)
        assert path.read_bytes() == b"\xfd"

    def test_read_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file raises FileNotFoundError unchanged."""
        with pytest.raises(FileNotFoundError):
            read_rsv(tmp_path / "missing.rsv")

    def test_write_to_missing_directory(self, tmp_path: Path) -> None:
        """Test writing into a missing directory raises OSError."""
        with pytest.raises(OSError):
            write_rsv([["a"]], tmp_path / "nope" / "table.rsv")

    def test_encode_error_writes_nothing(self, tmp_path: Path) -> None:
        """Test a table that fails to encode leaves no file behind."""
        path = tmp_path / "table.rsv"
        with pytest.raises(EncodeError):
            write_rsv([["a", 1]], path)
        assert not path.exists()

    def test_read_invalid_text(self, tmp_path: Path) -> None:
        """Test invalid UTF-8 in a file raises InvalidTextError."""
        path = tmp_path / "bad.rsv"
        path.write_bytes(b"\xc3\x28\xff\xfd")
        with pytest.raises(InvalidTextError):
            read_rsv(path)

    def test_debug_logging(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Test file operations log byte counts at debug level."""
        with caplog.at_level(logging.DEBUG, logger="rsvcodec"):
            write_rsv([["ab"]], tmp_path / "t.rsv")
        assert "Wrote 4 bytes" in caplog.text


class TestJsonConversion:
    """Test converting between JSON and RSV files."""

    def test_json_file_to_rsv(self, tmp_path: Path) -> None:
        """Test a JSON file converts to the expected RSV bytes."""
        json_path = tmp_path / "in.json"
        rsv_path = tmp_path / "out.rsv"
        json_path.write_text('[["Hello","🌎"],[],[null,""]]', encoding="utf-8")

        json_file_to_rsv(json_path, rsv_path)

        assert list(rsv_path.read_bytes()) == [
            72, 101, 108, 108, 111, 255, 240, 159, 140, 142, 255, 253, 253, 254, 255, 255, 253
        ]

    def test_rsv_file_to_json(self, tmp_path: Path, unicode_rsv: bytes) -> None:
        """Test an RSV file converts to equivalent JSON."""
        rsv_path = tmp_path / "in.rsv"
        json_path = tmp_path / "out.json"
        rsv_path.write_bytes(unicode_rsv)

        rsv_file_to_json(rsv_path, json_path)

        assert json.loads(json_path.read_text(encoding="utf-8")) == [["Hello", "🌎"], [], [None, ""]]

    def test_malformed_json_file(self, tmp_path: Path) -> None:
        """Test malformed JSON surfaces as ValidationError and writes nothing."""
        json_path = tmp_path / "in.json"
        rsv_path = tmp_path / "out.rsv"
        json_path.write_text("[[", encoding="utf-8")

        with pytest.raises(ValidationError):
            json_file_to_rsv(json_path, rsv_path)
        assert not rsv_path.exists()

    def test_missing_json_file(self, tmp_path: Path) -> None:
        """Test a missing JSON file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            json_file_to_rsv(tmp_path / "missing.json", tmp_path / "out.rsv")
