# tests/parser_tests/test_lexer_tokens.py
# This file is part of Propcheck - Propositional Entailment by Enumeration
#
# Test suite for formula lexer tokenization and lexical policies

"""Test suite for formula lexer functionality.

This module tests the lexical analysis phase of formula parsing, verifying
keyword and atom recognition, separator skipping, and the two lexical
policies: ``then`` needs an open conditional, and atoms need an operator
between them.
"""

import pytest
from parser import lex, tokens_to_text, LexError
from utils.logger import get_logger


class TestFormulaLexer:
    """Test cases for formula lexer tokenization and error handling."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def _tokenize_to_types(self, text: str) -> list[str]:
        """Extract token types from input text.

        Args:
            text: Input string to tokenize

        Returns:
            List of token type strings
        """
        self.logger.debug(f"Tokenizing: '{text}'")
        token_types = [token.type for token in lex(text)]
        self.logger.debug(f"Token types: {token_types}")
        return token_types

    VALID_TOKENIZATION_CASES = [
        ("a and b", ["ATOM", "AND", "ATOM"]),
        ("not a or b", ["NOT", "ATOM", "OR", "ATOM"]),
        ("if a then b", ["IF", "ATOM", "THEN", "ATOM"]),
        ("iff a then b", ["IFF", "ATOM", "THEN", "ATOM"]),
        ("(a)", ["LPAREN", "ATOM", "RPAREN"]),
        ("not(a)and(b)", ["NOT", "LPAREN", "ATOM", "RPAREN", "AND", "LPAREN", "ATOM", "RPAREN"]),
        # Case sensitivity: capitalised keywords are atoms
        ("NOT", ["ATOM"]),
        ("And", ["ATOM"]),
        # Keyword-atom boundary cases: maximal runs win
        ("notion", ["ATOM"]),
        ("android", ["ATOM"]),
        ("iffy", ["ATOM"]),
        ("thenceforth", ["ATOM"]),
        ("ifa", ["ATOM"]),
        # Whitespace handling
        (" \t a \n and \r b ", ["ATOM", "AND", "ATOM"]),
    ]

    @pytest.mark.parametrize("input_text, expected_types", VALID_TOKENIZATION_CASES)
    def test_valid_tokenization(self, input_text, expected_types):
        """Test lexer correctly tokenizes valid formula syntax.

        Args:
            input_text: Valid formula string
            expected_types: Expected sequence of token types
        """
        actual_types = self._tokenize_to_types(input_text)

        assert actual_types == expected_types, (
            f"Tokenization mismatch for '{input_text}':\n"
            f"Expected: {expected_types}\n"
            f"Actual: {actual_types}"
        )

    def test_keyword_recognition(self):
        """Test proper recognition of every reserved keyword."""
        keyword_cases = [
            ("not a", "NOT"),
            ("a and b", "AND"),
            ("a or b", "OR"),
            ("if a then b", "IF"),
            ("iff a then b", "IFF"),
        ]

        for formula, expected in keyword_cases:
            actual = self._tokenize_to_types(formula)
            assert expected in actual, f"Keyword in '{formula}' not recognized as {expected}"

    def test_atom_values_preserved(self):
        """Test that atom tokens carry the matched text."""
        tokens = lex("rain and Wet")

        assert [token.value for token in tokens] == ["rain", "and", "Wet"]

    # Characters that are skipped as separators rather than rejected
    SEPARATOR_CHARACTERS = ["@", "#", "$", "%", "^", "*", "=", "~", "?", ":", ";", ".", ",", "-", "+", "0", "7"]

    @pytest.mark.parametrize("separator", SEPARATOR_CHARACTERS)
    def test_non_token_characters_are_skipped(self, separator):
        """Test lexer skips characters that start no token.

        Args:
            separator: Character that belongs to no token
        """
        actual = self._tokenize_to_types(f"a {separator}and{separator} b{separator}")

        assert actual == ["ATOM", "AND", "ATOM"], (
            f"Separator '{separator}' was not skipped: {actual}"
        )

    def test_empty_input(self):
        """Test lexer behavior with empty input."""
        assert self._tokenize_to_types("") == [], "Empty input should produce no tokens"
        assert self._tokenize_to_types("  ,;  ") == [], "Separators alone produce no tokens"

    def test_lex_returns_materialized_list(self):
        """Test that lexing produces a list rather than a lazy stream."""
        tokens = lex("a or b")

        assert isinstance(tokens, list)
        assert len(tokens) == 3

    # Lexical policy violations
    LEX_ERROR_CASES = [
        ("a b", "Missing operator between atoms"),
        ("a and b c", "Missing operator between atoms"),
        ("a1b", "Missing operator between atoms"),
        ("then a", "then without if"),
        ("a then b", "then without if"),
        ("if a then b then c", "then without if"),
    ]

    @pytest.mark.parametrize("invalid_input, expected_message", LEX_ERROR_CASES)
    def test_lexical_policy_violations(self, invalid_input, expected_message):
        """Test lexer raises LexError when a lexical policy is violated.

        Args:
            invalid_input: Formula text violating a policy
            expected_message: Fragment identifying the violated policy
        """
        with pytest.raises(LexError) as exc_info:
            lex(invalid_input)

        error_message = str(exc_info.value)
        if expected_message == "then without if":
            assert "without preceding 'if'" in error_message, error_message
        else:
            assert expected_message in error_message, error_message

    def test_nested_conditionals_balance_then(self):
        """Test that each open conditional accepts exactly one then."""
        actual = self._tokenize_to_types("if if a then b then c")

        assert actual == ["IF", "IF", "ATOM", "THEN", "ATOM", "THEN", "ATOM"]

    def test_atoms_separated_by_parenthesis_are_not_adjacent(self):
        """Test that only directly consecutive atoms are rejected."""
        actual = self._tokenize_to_types("(a)(b)")

        assert actual == ["LPAREN", "ATOM", "RPAREN", "LPAREN", "ATOM", "RPAREN"]

    RESERIALIZATION_CASES = [
        "a and b",
        "not (a or b)",
        "if a then iff b then c",
        "x or y?and;z",
    ]

    @pytest.mark.parametrize("formula", RESERIALIZATION_CASES)
    def test_relexing_serialized_tokens_is_idempotent(self, formula):
        """Test that lexing the serialization of tokens yields the same tokens.

        Args:
            formula: Formula text to lex, serialize and lex again
        """
        tokens = lex(formula)
        relexed = lex(tokens_to_text(tokens))

        assert [(t.type, t.value) for t in relexed] == [
            (t.type, t.value) for t in tokens
        ]
