"""Unit tests for Config (codeforge.config).

Tests cover:
- Defaults and log level normalisation
- resolve_output for relative and absolute paths
- save/load round trip and load errors
- from_env parsing and invalid values
"""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from codeforge.config import Config, ConfigError


pytestmark = pytest.mark.unit


class TestConfigDefaults:
    def test_defaults(self):
        config = Config()
        assert config.output_dir == Path("./generated")
        assert config.encoding == "utf-8"
        assert config.log_level == "WARNING"
        assert config.overwrite is False

    def test_log_level_is_normalised(self):
        config = Config(log_level="debug")
        assert config.log_level == "DEBUG"
        assert config.log_level_number == logging.DEBUG

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Config(log_level="chatty")


class TestResolveOutput:
    def test_relative_path_joins_output_dir(self, tmp_path: Path):
        config = Config(output_dir=tmp_path)
        assert config.resolve_output("src/a.ts") == tmp_path / "src" / "a.ts"

    def test_absolute_path_unchanged(self, tmp_path: Path):
        target = tmp_path / "abs.ts"
        assert Config(output_dir=Path("elsewhere")).resolve_output(target) == target


class TestSaveLoad:
    def test_round_trip(self, tmp_path: Path):
        original = Config(output_dir=tmp_path / "gen", log_level="INFO", overwrite=True)
        path = original.save(tmp_path / "cfg" / "config.json")
        assert path.exists()
        assert Config.load(path) == original

    def test_load_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            Config.load(tmp_path / "missing.json")

    def test_load_invalid_json(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text('{"log_level": "nope"}', encoding="utf-8")
        with pytest.raises(ConfigError):
            Config.load(path)


class TestFromEnv:
    def test_empty_environment_gives_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            assert Config.from_env() == Config()

    def test_reads_variables(self, tmp_path: Path):
        env = {
            "CODEFORGE_OUTPUT_DIR": str(tmp_path),
            "CODEFORGE_ENCODING": "latin-1",
            "CODEFORGE_LOG_LEVEL": "info",
            "CODEFORGE_OVERWRITE": "yes",
        }
        with patch.dict("os.environ", env, clear=True):
            config = Config.from_env()
        assert config.output_dir == tmp_path
        assert config.encoding == "latin-1"
        assert config.log_level == "INFO"
        assert config.overwrite is True

    @pytest.mark.parametrize("raw, expected", [("0", False), ("false", False), ("On", True)])
    def test_overwrite_values(self, raw, expected):
        with patch.dict("os.environ", {"CODEFORGE_OVERWRITE": raw}, clear=True):
            assert Config.from_env().overwrite is expected

    def test_invalid_overwrite(self):
        with patch.dict("os.environ", {"CODEFORGE_OVERWRITE": "maybe"}, clear=True):
            with pytest.raises(ConfigError):
                Config.from_env()

    def test_invalid_log_level(self):
        with patch.dict("os.environ", {"CODEFORGE_LOG_LEVEL": "loud"}, clear=True):
            with pytest.raises(ConfigError):
                Config.from_env()
