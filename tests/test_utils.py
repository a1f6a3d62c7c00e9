"""Unit tests for utility functions (codeforge.utils).

Tests cover:
- parse_structured for JSON and YAML, malformed and non-mapping input
- load_input_file through a fake FileAccess
- Rich output helpers
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from codeforge.files import LocalFileAccess
from codeforge.utils import (
    InputFileError,
    load_input_file,
    parse_structured,
    print_code,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)


pytestmark = pytest.mark.unit


class TestParseStructured:
    def test_json(self):
        assert parse_structured('{"name": "f"}', ".json") == {"name": "f"}

    def test_yaml(self):
        text = "name: User\nproperties:\n  - name: id\n    type: string\n"
        assert parse_structured(text, ".YML") == {
            "name": "User",
            "properties": [{"name": "id", "type": "string"}],
        }

    def test_unknown_suffix_parsed_as_json(self):
        assert parse_structured('{"a": 1}', ".txt") == {"a": 1}

    def test_malformed_json(self):
        with pytest.raises(InputFileError):
            parse_structured("{not json", ".json")

    def test_malformed_yaml(self):
        with pytest.raises(InputFileError):
            parse_structured("name: [unclosed", ".yaml")

    def test_non_mapping(self):
        with pytest.raises(InputFileError, match="mapping"):
            parse_structured("[1, 2]", ".json")


class TestLoadInputFile:
    @pytest.mark.asyncio
    async def test_reads_through_file_access(self, fake_files):
        fake_files.files["fn.json"] = '{"name": "f"}'
        assert await load_input_file("fn.json", fake_files) == {"name": "f"}
        assert [call[0] for call in fake_files.calls] == ["exists", "read"]

    @pytest.mark.asyncio
    async def test_missing_file(self, fake_files):
        with pytest.raises(InputFileError, match="not found"):
            await load_input_file("missing.yaml", fake_files)


class TestRichHelpers:
    def test_messages_are_printed(self):
        with patch("codeforge.utils.console") as mock_console:
            print_success("done")
            print_error("bad [thing]")
            print_warning("careful")
        assert mock_console.print.call_count == 3
        assert "bad \\[thing]" in mock_console.print.call_args_list[1].args[0]

    def test_summary_table(self):
        with patch("codeforge.utils.console") as mock_console:
            print_summary_table([{"name": "A", "version": "1.0.0"}])
        assert mock_console.print.call_count == 2

    def test_summary_table_empty(self):
        with patch("codeforge.utils.console") as mock_console:
            print_summary_table([])
        assert mock_console.print.call_count == 2

    def test_print_code(self):
        with patch("codeforge.utils.console") as mock_console:
            print_code("const x = 1;")
        mock_console.print.assert_called_once()


class TestLoadInputFileEncoding:
    @pytest.mark.asyncio
    async def test_invalid_utf8_raises_input_file_error(self, tmp_path):
        target = tmp_path / "broken.json"
        target.write_bytes(b"\xff\xfe{}")
        with pytest.raises(InputFileError, match="Cannot read"):
            await load_input_file(target, LocalFileAccess())
