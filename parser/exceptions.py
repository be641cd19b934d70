# parser/exceptions.py
# This file is part of Propcheck - Propositional Entailment by Enumeration
#
# Custom exceptions for formula lexing and parsing

"""Domain-specific exceptions for propositional formula processing.

This module defines exceptions that can be raised while turning formula text
into an Abstract Syntax Tree. Lexing and parsing both fail fast: no partial
tree is ever returned, and the caller receives a typed error it can report
per formula instead of aborting a whole batch.
"""

from typing import Optional


class FormulaError(RuntimeError):
    """Base class for every error caused by malformed formula text."""

    pass


class LexError(FormulaError):
    """Exception raised when tokenization violates a lexical policy.

    Covers a ``then`` keyword with no open ``if``/``iff`` and two atoms that
    follow each other without an operator in between.
    """

    pass


class ParseError(FormulaError):
    """Exception raised when the token stream does not match the grammar.

    Indicates an empty formula, a missing expression, a missing ``then`` or
    closing parenthesis, or tokens left over after a complete formula.
    """

    pass


class KnowledgeBaseError(FormulaError):
    """Exception raised when one formula of a knowledge base fails to parse.

    Attributes:
        index: Zero-based position of the failing formula
        source: Text of the failing formula
    """

    def __init__(self, index: int, source: str, reason: Optional[str] = None):
        self.index = index
        self.source = source
        message = f"Knowledge base formula #{index + 1} '{source}' is malformed"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
