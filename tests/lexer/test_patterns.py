# Copyright 2026 TinyLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the priority-ordered pattern table."""

import pytest

from tinylang.lexer.patterns import ESCAPES, PATTERNS, Handler, Pattern, in_operand_position
from tinylang.lexer.tokens import KEYWORDS, TokenType

# ###############
# Test Helpers
# ###############


def _index(predicate) -> int:
    """Return the position of the first pattern satisfying ``predicate``."""
    for index, pattern in enumerate(PATTERNS):
        if predicate(pattern):
            return index
    raise AssertionError("no pattern matched the predicate")


def _index_of_type(token_type: TokenType) -> int:
    return _index(lambda p: p.token_type == token_type)


def _index_of_handler(handler: Handler) -> int:
    return _index(lambda p: p.handler == handler)


def _first_match(source: str) -> Pattern | None:
    for pattern in PATTERNS:
        if pattern.match(source, 0) is not None:
            return pattern
    return None


# ###############
# Table Ordering
# ###############


class TestPriorityOrder:
    @pytest.mark.parametrize("keyword", sorted(KEYWORDS, key=lambda t: t.value))
    def test_keywords_before_identifier(self, keyword: TokenType) -> None:
        assert _index_of_type(keyword) < _index_of_handler(Handler.IDENTIFIER)

    @pytest.mark.parametrize(
        ("longer", "shorter"),
        [
            (TokenType.EQUAL, TokenType.ASSIGN),
            (TokenType.NOT_EQUAL, TokenType.NOT),
            (TokenType.LESS_EQUAL, TokenType.LESS),
            (TokenType.GREATER_EQUAL, TokenType.GREATER),
        ],
    )
    def test_two_char_operators_before_prefix(self, longer: TokenType, shorter: TokenType) -> None:
        assert _index_of_type(longer) < _index_of_type(shorter)

    def test_block_comment_before_divide(self) -> None:
        assert _index_of_handler(Handler.BLOCK_COMMENT) < _index_of_type(TokenType.DIVIDE)

    def test_negative_integer_before_subtract(self) -> None:
        assert _index_of_handler(Handler.NEGATIVE_INTEGER) < _index_of_type(TokenType.SUBTRACT)

    def test_every_fixed_token_has_a_pattern(self) -> None:
        fixed = {p.token_type for p in PATTERNS if p.handler == Handler.DEFAULT}
        literal_types = {TokenType.IDENTIFIER, TokenType.INTEGER, TokenType.STRING, TokenType.EOF}
        assert fixed == set(TokenType) - literal_types

    def test_only_default_patterns_carry_token_type(self) -> None:
        for pattern in PATTERNS:
            assert (pattern.token_type is not None) == (pattern.handler == Handler.DEFAULT)


# ###############
# Matching
# ###############


class TestMatching:
    def test_match_is_anchored_at_position(self) -> None:
        identifier = PATTERNS[_index_of_handler(Handler.IDENTIFIER)]
        assert identifier.match("  abc", 0) is None
        match = identifier.match("  abc", 2)
        assert match is not None
        assert match.group() == "abc"

    def test_keyword_requires_word_boundary(self) -> None:
        pattern = _first_match("iffy")
        assert pattern is not None
        assert pattern.handler == Handler.IDENTIFIER

    def test_keyword_matches_before_symbol(self) -> None:
        pattern = _first_match("while(")
        assert pattern is not None
        assert pattern.token_type == TokenType.WHILE

    def test_unknown_character_has_no_pattern(self) -> None:
        assert _first_match("#") is None

    def test_string_pattern_matches_opening_quote_only(self) -> None:
        pattern = _first_match('"abc"')
        assert pattern is not None
        assert pattern.handler == Handler.STRING
        assert pattern.match('"abc"', 0).end() == 1


# ###############
# Escapes and Operand Position
# ###############


class TestEscapes:
    def test_escape_table(self) -> None:
        assert {key: ord(value) for key, value in ESCAPES.items()} == {
            "n": 10,
            "t": 9,
            "r": 13,
            "\\": 92,
            "'": 39,
            "0": 0,
        }


class TestOperandPosition:
    def test_start_of_input(self) -> None:
        assert in_operand_position(None)

    @pytest.mark.parametrize(
        "previous",
        [TokenType.ASSIGN, TokenType.LPAREN, TokenType.COMMA, TokenType.ADD, TokenType.SEMICOLON, TokenType.PRINT],
    )
    def test_after_operators_and_delimiters(self, previous: TokenType) -> None:
        assert in_operand_position(previous)

    @pytest.mark.parametrize(
        "previous",
        [TokenType.IDENTIFIER, TokenType.INTEGER, TokenType.STRING, TokenType.RPAREN],
    )
    def test_after_operands(self, previous: TokenType) -> None:
        assert not in_operand_position(previous)
