# Copyright 2026 TinyLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexer for Tiny Language source text."""

from tinylang.lexer.errors import (
    EmptyCharacterLiteralError,
    InvalidEscapeError,
    LexerError,
    MultiCharacterLiteralError,
    NoMatchError,
    UnterminatedLiteralError,
)
from tinylang.lexer.lexer import tokenize
from tinylang.lexer.tokens import Token, TokenType

__all__ = [
    "tokenize",
    "Token",
    "TokenType",
    "LexerError",
    "NoMatchError",
    "UnterminatedLiteralError",
    "InvalidEscapeError",
    "EmptyCharacterLiteralError",
    "MultiCharacterLiteralError",
]
