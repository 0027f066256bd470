# Copyright 2026 TinyLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for Tiny Language source text.

Converts raw source text into a sequence of tokens for a subsequent parser.
"""

import re
from collections.abc import Callable
from typing import NoReturn

from tinylang.lexer.errors import (
    EmptyCharacterLiteralError,
    InvalidEscapeError,
    MultiCharacterLiteralError,
    NoMatchError,
    UnterminatedLiteralError,
)
from tinylang.lexer.patterns import ESCAPES, PATTERNS, Handler, Pattern, in_operand_position
from tinylang.lexer.tokens import Token, TokenType

# ###############
# Public Interface
# ###############


def tokenize(source: str) -> list[Token]:
    """Tokenize Tiny Language source text into a sequence of tokens.

    Returns a list of tokens. The final token is always an EOF token.
    Whitespace and comments are consumed and not included in the output.
    Character literals are emitted as INTEGER tokens holding their code point.

    Args:
        source: The full source text.

    Returns:
        A list of Token objects ending with a single EOF token.

    Raises:
        LexerError: On unrecognized input, unterminated literals or comments,
            invalid escape sequences, or malformed character literals.
    """
    return _Lexer(source).tokenize()


# ################
# Implementation
# ################


class _Lexer:
    """Internal scanner state: the cursor and the tokens emitted so far."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._column = 1
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Run the scanner and return all tokens including the terminal EOF."""
        while self._pos < len(self._source):
            pattern, match = self._select_pattern()
            self._DISPATCH[pattern.handler](self, pattern, match)
        self._tokens.append(Token(TokenType.EOF, "", self._line, self._column))
        return self._tokens

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _current(self) -> str:
        """Return the character at the current position, or '' at end of input."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _advance(self) -> str:
        """Consume the current character, update position tracking, and return it."""
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return ch

    def _advance_to(self, end: int) -> None:
        while self._pos < end:
            self._advance()

    def _emit(self, token_type: TokenType, value: str, line: int, column: int) -> None:
        self._tokens.append(Token(token_type, value, line, column))

    def _previous_type(self) -> TokenType | None:
        return self._tokens[-1].type if self._tokens else None

    # ------------------------------------------------------------------
    # Pattern selection
    # ------------------------------------------------------------------

    def _select_pattern(self) -> tuple[Pattern, re.Match[str]]:
        """Return the first pattern, in priority order, that matches at the cursor."""
        operand_position = in_operand_position(self._previous_type())
        for pattern in PATTERNS:
            if pattern.handler is Handler.NEGATIVE_INTEGER and not operand_position:
                continue
            match = pattern.match(self._source, self._pos)
            if match is not None:
                return pattern, match
        raise NoMatchError(
            f"Unrecognized character: {self._current()!r}",
            self._line,
            self._column,
            self._source[self._pos :],
        )

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _handle_default(self, pattern: Pattern, match: re.Match[str]) -> None:
        assert pattern.token_type is not None
        line, column = self._line, self._column
        self._advance_to(self._pos + len(pattern.token_type.value))
        self._emit(pattern.token_type, pattern.token_type.value, line, column)

    def _handle_skip(self, pattern: Pattern, match: re.Match[str]) -> None:
        self._advance_to(match.end())

    def _handle_block_comment(self, pattern: Pattern, match: re.Match[str]) -> None:
        """Consume from '/*' through the first '*/'. Comments do not nest."""
        start = self._pos
        start_line, start_column = self._line, self._column
        end = self._source.find("*/", match.end())
        if end == -1:
            raise UnterminatedLiteralError(
                "Unterminated block comment",
                start_line,
                start_column,
                self._source[start:],
            )
        self._advance_to(end + 2)

    def _handle_verbatim(self, token_type: TokenType, match: re.Match[str]) -> None:
        line, column = self._line, self._column
        self._advance_to(match.end())
        self._emit(token_type, match.group(), line, column)

    def _handle_identifier(self, pattern: Pattern, match: re.Match[str]) -> None:
        self._handle_verbatim(TokenType.IDENTIFIER, match)

    def _handle_integer(self, pattern: Pattern, match: re.Match[str]) -> None:
        self._handle_verbatim(TokenType.INTEGER, match)

    def _handle_string(self, pattern: Pattern, match: re.Match[str]) -> None:
        """Scan a double-quoted string literal, decoding escape sequences."""
        start = self._pos
        line, column = self._line, self._column
        self._advance()  # opening "
        chars: list[str] = []
        while not self._at_end():
            ch = self._current()
            if ch == '"':
                self._advance()  # closing "
                self._emit(TokenType.STRING, "".join(chars), line, column)
                return
            if ch == "\n":
                break
            if ch == "\\":
                chars.append(self._read_escape(start, line, column))
            else:
                chars.append(self._advance())
        raise UnterminatedLiteralError(
            "Unterminated string literal",
            line,
            column,
            self._source[start : self._pos],
        )

    def _handle_character(self, pattern: Pattern, match: re.Match[str]) -> None:
        """Scan a single-quoted character literal and emit its code point as an INTEGER."""
        start = self._pos
        line, column = self._line, self._column
        self._advance()  # opening '
        ch = self._current()
        if ch == "'":
            raise EmptyCharacterLiteralError("Empty character literal", line, column, "''")
        if ch in ("", "\n"):
            raise UnterminatedLiteralError(
                "Unterminated character literal",
                line,
                column,
                self._source[start : self._pos],
            )
        value = self._read_escape(start, line, column) if ch == "\\" else self._advance()
        if self._current() != "'":
            self._raise_bad_character_end(start, line, column)
        self._advance()  # closing '
        self._emit(TokenType.INTEGER, str(ord(value)), line, column)

    def _raise_bad_character_end(self, start: int, line: int, column: int) -> NoReturn:
        """Raise the error for a character literal not closed right after one character."""
        closing = self._source.find("'", self._pos)
        newline = self._source.find("\n", self._pos)
        if closing == -1 or (newline != -1 and newline < closing):
            raise UnterminatedLiteralError(
                "Unterminated character literal",
                line,
                column,
                self._source[start : self._pos],
            )
        raise MultiCharacterLiteralError(
            "Multi-character literal",
            line,
            column,
            self._source[start : closing + 1],
        )

    def _read_escape(self, start: int, line: int, column: int) -> str:
        """Consume a backslash escape and return the character it denotes.

        ``start``, ``line`` and ``column`` locate the enclosing literal, which is
        reported as unterminated when the input ends right after the backslash.
        """
        escape_line, escape_column = self._line, self._column
        self._advance()  # backslash
        if self._at_end():
            raise UnterminatedLiteralError(
                "Unterminated literal",
                line,
                column,
                self._source[start:],
            )
        esc = self._current()
        if esc not in ESCAPES:
            raise InvalidEscapeError(
                f"Invalid escape sequence: '\\{esc}'",
                escape_line,
                escape_column,
                "\\" + esc,
            )
        self._advance()
        return ESCAPES[esc]

    _DISPATCH: dict[Handler, Callable[["_Lexer", Pattern, re.Match[str]], None]] = {
        Handler.DEFAULT: _handle_default,
        Handler.SKIP: _handle_skip,
        Handler.BLOCK_COMMENT: _handle_block_comment,
        Handler.IDENTIFIER: _handle_identifier,
        Handler.INTEGER: _handle_integer,
        Handler.NEGATIVE_INTEGER: _handle_integer,
        Handler.STRING: _handle_string,
        Handler.CHARACTER: _handle_character,
    }
