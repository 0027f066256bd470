# Copyright 2026 TinyLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the TinyLang command-line interface."""

import argparse
import sys
from pathlib import Path

from tinylang.config import CONFIG_FILE_NAME, OUTPUT_FORMATS, ConfigError, LexConfig, find_config, load_config
from tinylang.dump import DumpError, dump_tokens
from tinylang.lexer import LexerError, tokenize

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the TinyLang CLI."""
    parser = argparse.ArgumentParser(
        prog="tinylang",
        description="TinyLang - lexical analyzer for the Tiny teaching language",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # lex subcommand
    lex_parser = subparsers.add_parser(
        "lex",
        help="Tokenize a source file and print its tokens",
        description="Tokenize a Tiny Language source file and print one token per line.",
    )
    lex_parser.add_argument("file", help="Path to the source file")
    lex_parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: from configuration, otherwise text)",
    )
    lex_parser.add_argument(
        "--config",
        default=None,
        help=f"Configuration file (default: {CONFIG_FILE_NAME} next to the source file)",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "lex":
        return _cmd_lex(args)
    return 0


def _cmd_lex(args: argparse.Namespace) -> int:
    """Handle the lex subcommand."""
    source_path = Path(args.file).resolve()

    if not source_path.is_file():
        print(f"Error: source file '{source_path}' does not exist.", file=sys.stderr)
        return 1

    try:
        config = _resolve_config(args, source_path)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    output_format = args.output_format or config.output_format

    try:
        source = source_path.read_text(encoding=config.encoding)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: cannot read '{source_path}': {exc}", file=sys.stderr)
        return 1

    try:
        tokens = tokenize(source)
    except LexerError as exc:
        print(f"Error: {source_path}: {exc}", file=sys.stderr)
        return 1

    try:
        print(dump_tokens(tokens, output_format), end="")
    except DumpError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def _resolve_config(args: argparse.Namespace, source_path: Path) -> LexConfig:
    """Load the explicit configuration file, the one beside the source, or the defaults."""
    if args.config is not None:
        return load_config(Path(args.config))
    config_path = find_config(source_path.parent)
    if config_path is None:
        return LexConfig()
    return load_config(config_path)
