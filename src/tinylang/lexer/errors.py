# Copyright 2026 TinyLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Exceptions raised by the Tiny Language lexer."""

# ###############
# Public Interface
# ###############

FRAGMENT_LIMIT = 20


class LexerError(Exception):
    """Raised when the scanner cannot turn the input into tokens.

    Lexical errors are terminal: the scanner never returns a partial token list.

    Attributes:
        reason: Human-readable description of the problem.
        line: 1-based line number of the error.
        column: 1-based column number of the error.
        fragment: The offending source text, truncated to FRAGMENT_LIMIT characters.
    """

    def __init__(self, reason: str, line: int, column: int, fragment: str = "") -> None:
        super().__init__(f"Line {line}, column {column}: {reason}")
        self.reason = reason
        self.line = line
        self.column = column
        self.fragment = fragment[:FRAGMENT_LIMIT]


class NoMatchError(LexerError):
    """No pattern recognizes the text at the current position."""


class UnterminatedLiteralError(LexerError):
    """A string, character literal or block comment is missing its closing delimiter."""


class InvalidEscapeError(LexerError):
    """A backslash is followed by a character outside the escape table."""


class EmptyCharacterLiteralError(LexerError):
    """A character literal has nothing between its quotes."""


class MultiCharacterLiteralError(LexerError):
    """A character literal holds more than one character."""
