# Copyright 2026 TinyLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token types and the token value produced by the Tiny Language lexer."""

import enum
from dataclasses import dataclass, field

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the Tiny Language lexer."""

    # Keywords
    IF = "if"
    ELSE = "else"
    WHILE = "while"
    PRINT = "print"
    PUTC = "putc"

    # Arithmetic operators
    MULTIPLY = "*"
    DIVIDE = "/"
    MOD = "%"
    ADD = "+"
    SUBTRACT = "-"

    # Relational and logical operators
    LESS = "<"
    LESS_EQUAL = "<="
    GREATER = ">"
    GREATER_EQUAL = ">="
    EQUAL = "=="
    NOT_EQUAL = "!="
    NOT = "!"
    ASSIGN = "="
    AND = "&&"
    OR = "||"

    # Delimiters
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"
    SEMICOLON = ";"
    COMMA = ","

    # Literals
    IDENTIFIER = "IDENTIFIER"
    INTEGER = "INTEGER"
    STRING = "STRING"

    # End of input
    EOF = "EOF"


KEYWORDS: frozenset[TokenType] = frozenset(
    {TokenType.IF, TokenType.ELSE, TokenType.WHILE, TokenType.PRINT, TokenType.PUTC}
)

LITERALS: frozenset[TokenType] = frozenset({TokenType.IDENTIFIER, TokenType.INTEGER, TokenType.STRING})


@dataclass(frozen=True)
class Token:
    """A lexical token with its source location.

    Attributes:
        type: The kind of token.
        value: The identifier text, the integer numeral (character literals are
            given as their decimal code point), the decoded string content, or the
            fixed lexeme for keywords and operators. Empty for EOF.
        line: 1-based line number where the token starts.
        column: 1-based column number where the token starts.

    The position is diagnostic metadata and does not take part in equality.
    """

    type: TokenType
    value: str
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    @property
    def is_literal(self) -> bool:
        return self.type in LITERALS
