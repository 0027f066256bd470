# Copyright 2026 TinyLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering of token sequences as text, YAML, or JSON."""

import yaml
from pydantic import BaseModel, ConfigDict

from tinylang.lexer.tokens import Token, TokenType

# ###############
# Public Interface
# ###############


class DumpError(Exception):
    """Raised when tokens cannot be rendered in the requested format."""


class TokenRecord(BaseModel):
    """Serializable form of a single token."""

    model_config = ConfigDict(extra="forbid")

    type: str
    value: str
    line: int
    column: int


class TokenStream(BaseModel):
    """Serializable form of a complete token sequence."""

    model_config = ConfigDict(extra="forbid")

    tokens: list[TokenRecord]


def display_name(token_type: TokenType) -> str:
    """Return the name used for ``token_type`` in text output, e.g. ``Keyword_print``."""
    return _DISPLAY_NAMES[token_type]


def format_token(token: Token) -> str:
    """Render one token as a single line: ``LINE COLUMN KIND [VALUE]``."""
    text = f"{token.line:5d} {token.column:6d} {display_name(token.type):<16}"
    if token.type is TokenType.STRING:
        text += f' "{_escape(token.value)}"'
    elif token.is_literal:
        text += f" {token.value}"
    return text.rstrip()


def dump_tokens(tokens: list[Token], output_format: str = "text") -> str:
    """Render a token sequence in the given output format.

    Args:
        tokens: Tokens as returned by ``tokenize``.
        output_format: ``text`` (one token per line), ``yaml``, or ``json``.

    Returns:
        The rendered document, ending with a newline.

    Raises:
        DumpError: If the output format is unknown.
    """
    if output_format == "text":
        return "".join(f"{format_token(token)}\n" for token in tokens)
    stream = to_stream(tokens)
    if output_format == "yaml":
        return yaml.dump(stream.model_dump(), default_flow_style=False, sort_keys=False, allow_unicode=True)
    if output_format == "json":
        return stream.model_dump_json(indent=2) + "\n"
    raise DumpError(f"Unknown output format: '{output_format}'")


def to_stream(tokens: list[Token]) -> TokenStream:
    """Convert tokens into their serializable model."""
    return TokenStream(
        tokens=[
            TokenRecord(type=display_name(tok.type), value=tok.value, line=tok.line, column=tok.column)
            for tok in tokens
        ]
    )


# ################
# Implementation
# ################

_DISPLAY_NAMES: dict[TokenType, str] = {
    TokenType.IF: "Keyword_if",
    TokenType.ELSE: "Keyword_else",
    TokenType.WHILE: "Keyword_while",
    TokenType.PRINT: "Keyword_print",
    TokenType.PUTC: "Keyword_putc",
    TokenType.MULTIPLY: "Op_multiply",
    TokenType.DIVIDE: "Op_divide",
    TokenType.MOD: "Op_mod",
    TokenType.ADD: "Op_add",
    TokenType.SUBTRACT: "Op_subtract",
    TokenType.LESS: "Op_less",
    TokenType.LESS_EQUAL: "Op_lessequal",
    TokenType.GREATER: "Op_greater",
    TokenType.GREATER_EQUAL: "Op_greaterequal",
    TokenType.EQUAL: "Op_equal",
    TokenType.NOT_EQUAL: "Op_notequal",
    TokenType.NOT: "Op_not",
    TokenType.ASSIGN: "Op_assign",
    TokenType.AND: "Op_and",
    TokenType.OR: "Op_or",
    TokenType.LPAREN: "LeftParen",
    TokenType.RPAREN: "RightParen",
    TokenType.LBRACE: "LeftBrace",
    TokenType.RBRACE: "RightBrace",
    TokenType.SEMICOLON: "Semicolon",
    TokenType.COMMA: "Comma",
    TokenType.IDENTIFIER: "Identifier",
    TokenType.INTEGER: "Integer",
    TokenType.STRING: "String",
    TokenType.EOF: "End_of_input",
}

_REVERSE_ESCAPES: dict[str, str] = {
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\\": "\\\\",
    "\0": "\\0",
}


def _escape(value: str) -> str:
    return "".join(_escape_char(ch) for ch in value)


def _escape_char(ch: str) -> str:
    """Return a printable, single-line spelling of one string character."""
    if ch in _REVERSE_ESCAPES:
        return _REVERSE_ESCAPES[ch]
    if ch.isprintable():
        return ch
    code = ord(ch)
    if code <= 0xFF:
        return f"\\x{code:02x}"
    if code <= 0xFFFF:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"
