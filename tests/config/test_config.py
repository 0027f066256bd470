# Copyright 2026 TinyLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the TinyLang configuration file parser."""

from pathlib import Path

import pytest

from tinylang.config import CONFIG_FILE_NAME, ConfigError, LexConfig, find_config, load_config

# ###############
# Test Helpers
# ###############


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / CONFIG_FILE_NAME
    path.write_text(content, encoding="utf-8")
    return path


# ###############
# Loading
# ###############


class TestLoadConfig:
    def test_full_config(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "output-format: yaml\nencoding: latin-1\n")
        config = load_config(path)
        assert config == LexConfig(output_format="yaml", encoding="latin-1")

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        config = load_config(_write(tmp_path, ""))
        assert config.output_format == "text"
        assert config.encoding == "utf-8"

    def test_partial_config_keeps_defaults(self, tmp_path: Path) -> None:
        config = load_config(_write(tmp_path, "output-format: json\n"))
        assert config.output_format == "json"
        assert config.encoding == "utf-8"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(_write(tmp_path, "output-format: [unclosed\n"))

    def test_non_mapping_document(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="must be a YAML mapping"):
            load_config(_write(tmp_path, "- text\n- yaml\n"))

    def test_unknown_key(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="unknown key"):
            load_config(_write(tmp_path, "colour: true\n"))

    def test_unknown_output_format(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="output-format"):
            load_config(_write(tmp_path, "output-format: xml\n"))

    def test_non_string_value(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="must be a string"):
            load_config(_write(tmp_path, "encoding: 8\n"))

    def test_unknown_encoding(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="unknown encoding"):
            load_config(_write(tmp_path, "encoding: no-such-codec\n"))

    @pytest.mark.parametrize("encoding", ["rot13", "base64", "hex"])
    def test_non_text_encoding(self, tmp_path: Path, encoding: str) -> None:
        with pytest.raises(ConfigError, match="not a text encoding"):
            load_config(_write(tmp_path, f"encoding: {encoding}\n"))

    def test_error_mentions_file(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "output-format: xml\n")
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert str(path) in str(exc_info.value)


# ###############
# Discovery
# ###############


class TestFindConfig:
    def test_found_in_directory(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "")
        assert find_config(tmp_path) == path

    def test_absent(self, tmp_path: Path) -> None:
        assert find_config(tmp_path) is None

    def test_directory_with_config_name_is_ignored(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILE_NAME).mkdir()
        assert find_config(tmp_path) is None
