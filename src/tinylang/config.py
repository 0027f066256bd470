# Copyright 2026 TinyLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the TinyLang project configuration file."""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".tinylang.yaml"

OUTPUT_FORMATS: tuple[str, ...] = ("text", "yaml", "json")


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass
class LexConfig:
    """Settings used by the command-line front end.

    Attributes:
        output_format: How tokens are printed: one of OUTPUT_FORMATS.
        encoding: Text encoding used to read source files.
    """

    output_format: str = "text"
    encoding: str = "utf-8"


def find_config(directory: Path) -> Path | None:
    """Return the path of the configuration file in ``directory``, if one exists."""
    candidate = directory / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate
    return None


def load_config(path: Path) -> LexConfig:
    """Load and parse a TinyLang configuration file.

    Args:
        path: Path to the `.tinylang.yaml` file.

    Returns:
        A LexConfig instance populated from the file. Missing keys keep their defaults.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    return _parse_config(text, source_label=str(path))


# ################
# Implementation
# ################

_KNOWN_KEYS = frozenset({"output-format", "encoding"})


def _parse_config(text: str, source_label: str = "<string>") -> LexConfig:
    """Parse configuration YAML text into a LexConfig.

    An empty document yields the default configuration.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return LexConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: config must be a YAML mapping")

    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{source_label}: unknown key(s): {', '.join(unknown)}")

    config = LexConfig()
    if "output-format" in data:
        config.output_format = _require_string(data, "output-format", source_label)
        if config.output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"{source_label}: 'output-format' must be one of {', '.join(OUTPUT_FORMATS)}"
            )
    if "encoding" in data:
        config.encoding = _require_string(data, "encoding", source_label)
        try:
            codec = codecs.lookup(config.encoding)
        except LookupError:
            raise ConfigError(f"{source_label}: unknown encoding '{config.encoding}'") from None
        # Codecs such as rot13 or base64 map bytes to bytes and cannot decode source text.
        if not codec._is_text_encoding:
            raise ConfigError(f"{source_label}: '{config.encoding}' is not a text encoding")
    return config


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a string field from a mapping, raising ConfigError on a wrong type."""
    value = mapping[key]
    if not isinstance(value, str):
        raise ConfigError(f"{source_label}: '{key}' must be a string")
    return value
