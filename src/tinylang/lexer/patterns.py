# Copyright 2026 TinyLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""The priority-ordered pattern table driving the Tiny Language lexer.

At every position the scanner tries the patterns top to bottom and takes the
first one that matches. Order, not match length, decides between overlapping
patterns: keywords come before identifiers, two-character operators before
their one-character prefixes, and block comments before the division operator.
"""

import enum
import re
from dataclasses import dataclass

from tinylang.lexer.tokens import TokenType

# ###############
# Public Interface
# ###############


class Handler(enum.Enum):
    """What the scanner does with the text a pattern matched."""

    DEFAULT = "default"
    SKIP = "skip"
    BLOCK_COMMENT = "block_comment"
    IDENTIFIER = "identifier"
    INTEGER = "integer"
    NEGATIVE_INTEGER = "negative_integer"
    STRING = "string"
    CHARACTER = "character"


@dataclass(frozen=True)
class Pattern:
    """A recognizer paired with the handler that turns its match into tokens.

    Attributes:
        regex: Compiled expression, matched at the cursor position only.
        handler: How the match is turned into zero or one token.
        token_type: The fixed token emitted by DEFAULT handlers.
    """

    regex: re.Pattern[str]
    handler: Handler
    token_type: TokenType | None = None

    def match(self, source: str, pos: int) -> re.Match[str] | None:
        """Return the match anchored at ``pos``, if any."""
        return self.regex.match(source, pos)


# Escape sequences accepted inside string and character literals.
ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    "'": "'",
    "0": "\0",
}

# Tokens after which a '-' is a binary operator rather than the sign of a literal.
OPERAND_END_TYPES: frozenset[TokenType] = frozenset(
    {TokenType.IDENTIFIER, TokenType.INTEGER, TokenType.STRING, TokenType.RPAREN}
)


def in_operand_position(previous: TokenType | None) -> bool:
    """Return True when a '-' following ``previous`` may start a negative integer."""
    return previous is None or previous not in OPERAND_END_TYPES


# ################
# Implementation
# ################


def _fixed(token_type: TokenType) -> Pattern:
    return Pattern(re.compile(re.escape(token_type.value)), Handler.DEFAULT, token_type)


def _keyword(token_type: TokenType) -> Pattern:
    # The lookahead keeps 'iffy' or 'print2' whole for the identifier pattern.
    return Pattern(
        re.compile(re.escape(token_type.value) + r"(?![A-Za-z0-9_])"),
        Handler.DEFAULT,
        token_type,
    )


PATTERNS: tuple[Pattern, ...] = (
    Pattern(re.compile(r"[ \t\r\n\f\v]+"), Handler.SKIP),
    Pattern(re.compile(r"/\*"), Handler.BLOCK_COMMENT),
    Pattern(re.compile(r"-[0-9]+"), Handler.NEGATIVE_INTEGER),
    Pattern(re.compile(r"[0-9]+"), Handler.INTEGER),
    Pattern(re.compile(r'"'), Handler.STRING),
    Pattern(re.compile(r"'"), Handler.CHARACTER),
    _keyword(TokenType.PRINT),
    _keyword(TokenType.PUTC),
    _keyword(TokenType.WHILE),
    _keyword(TokenType.IF),
    _keyword(TokenType.ELSE),
    Pattern(re.compile(r"[A-Za-z_][A-Za-z0-9_]*"), Handler.IDENTIFIER),
    _fixed(TokenType.EQUAL),
    _fixed(TokenType.NOT_EQUAL),
    _fixed(TokenType.LESS_EQUAL),
    _fixed(TokenType.GREATER_EQUAL),
    _fixed(TokenType.AND),
    _fixed(TokenType.OR),
    _fixed(TokenType.ASSIGN),
    _fixed(TokenType.NOT),
    _fixed(TokenType.LESS),
    _fixed(TokenType.GREATER),
    _fixed(TokenType.ADD),
    _fixed(TokenType.SUBTRACT),
    _fixed(TokenType.MULTIPLY),
    _fixed(TokenType.DIVIDE),
    _fixed(TokenType.MOD),
    _fixed(TokenType.LPAREN),
    _fixed(TokenType.RPAREN),
    _fixed(TokenType.LBRACE),
    _fixed(TokenType.RBRACE),
    _fixed(TokenType.SEMICOLON),
    _fixed(TokenType.COMMA),
)
