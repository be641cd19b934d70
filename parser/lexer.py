# parser/lexer.py
# This file is part of Propcheck - Propositional Entailment by Enumeration
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module implements tokenization of ASCII propositional formulas, breaking
input strings into tokens for parser consumption. The SLY lexer recognizes
keywords and atoms; the ``lex`` function materializes the token stream and
enforces the lexical policies that plain regular expressions cannot express.

Supported Tokens:
- Keywords: not, and, or, if, iff, then (case sensitive)
- Atoms: any other maximal run of letters
- Punctuation: (, )
- Anything else (whitespace, digits, symbols): skipped as a separator
"""

from typing import Iterable, List

from sly import Lexer
from sly.lex import Token

from .exceptions import LexError
from utils.logger import get_logger


class FormulaLexer(Lexer):
    """SLY-based lexer for propositional formula tokenization.

    Distinguishes reserved keywords from atom names by remapping maximal
    alphabetic runs. Characters that belong to no token are treated as
    separators rather than errors.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
        ATOM: Atom pattern with keyword mapping
    """

    # Valid token types for parser recognition
    tokens = {
        "ATOM",
        "NOT",
        "AND",
        "OR",
        "IF",
        "IFF",
        "THEN",
        "LPAREN",
        "RPAREN",
    }

    # Whitespace characters to ignore
    ignore = " \t\r\n"

    LPAREN = r"\("
    RPAREN = r"\)"

    # Maximal alphabetic run; "iff" never splits into "if" + "f"
    ATOM = r"[a-zA-Z]+"

    # Keyword mapping: reassign token types for reserved words
    ATOM["not"] = "NOT"
    ATOM["and"] = "AND"
    ATOM["or"] = "OR"
    ATOM["if"] = "IF"
    ATOM["iff"] = "IFF"
    ATOM["then"] = "THEN"

    def error(self, t):
        """Skip characters that do not start any token.

        Punctuation, digits and other symbols act as separators between
        tokens, so the offending character is dropped and scanning resumes
        right after it.

        Args:
            t: SLY token object containing error context
        """
        self.index += 1


_TOKEN_TEXT = {
    "NOT": "not",
    "AND": "and",
    "OR": "or",
    "IF": "if",
    "IFF": "iff",
    "THEN": "then",
    "LPAREN": "(",
    "RPAREN": ")",
}


def lex(source: str) -> List[Token]:
    """Tokenize formula text into a fully materialized token list.

    Runs the SLY lexer and enforces two policies while collecting tokens:
    ``then`` must close a previously opened ``if``/``iff``, and two atoms
    may not follow each other without an operator.

    Args:
        source: Raw formula text

    Returns:
        List of SLY tokens in input order

    Raises:
        LexError: A lexical policy is violated
    """
    logger = get_logger()
    logger.debug(f"Lexing formula: {source}")

    tokens: List[Token] = []
    open_conditionals = 0
    previous_was_atom = False

    for token in FormulaLexer().tokenize(source):
        if token.type in ("IF", "IFF"):
            open_conditionals += 1
        elif token.type == "THEN":
            if open_conditionals == 0:
                raise LexError(
                    f"Unexpected 'then' without preceding 'if' at position {token.index}"
                )
            open_conditionals -= 1

        if token.type == "ATOM" and previous_was_atom:
            raise LexError(
                f"Missing operator between atoms '{tokens[-1].value}' and "
                f"'{token.value}' at position {token.index}"
            )

        previous_was_atom = token.type == "ATOM"
        tokens.append(token)

    logger.debug(f"Token types: {[token.type for token in tokens]}")
    return tokens


def tokens_to_text(tokens: Iterable[Token]) -> str:
    """Serialize tokens back into formula text.

    Re-lexing the result yields the same token types and values.

    Args:
        tokens: Tokens produced by ``lex``

    Returns:
        Space-separated formula text
    """
    return " ".join(
        token.value if token.type == "ATOM" else _TOKEN_TEXT[token.type]
        for token in tokens
    )
