# parser/__init__.py
# This file is part of Propcheck - Propositional Entailment by Enumeration
#
# Formula lexing and parsing components for propositional logic expressions

"""Propositional formula lexing and parsing.

This module provides the text-to-tree half of the checker. The pipeline
tokenizes formula text with ``lex`` and turns the token list into an
immutable Abstract Syntax Tree with ``parse_tokens``; ``parse`` runs both
steps. Knowledge bases are parsed formula by formula so that a failure names
the formula that caused it.

Core Functions:
    lex: Converts formula text into a list of tokens
    parse_tokens: Builds an AST from a token list
    parse: Complete lexing and parsing pipeline
    parse_knowledge_base: Parses a sequence of formula strings

Supported Syntax:
    - Atoms: maximal runs of letters other than the keywords
    - Connectives: not, and, or, if ... then, iff ... then
    - Parenthetical grouping

Example:
    >>> from parser import parse
    >>> ast = parse("if a then b")
    >>> # Returns If(antecedent=Atom(name='a'), consequent=Atom(name='b'))
"""

from typing import Iterable, List

from .exceptions import FormulaError, LexError, ParseError, KnowledgeBaseError
from .lexer import lex, tokens_to_text
from .grammar import _FormulaParser
from .ast_nodes import Expr
from utils.logger import get_logger


def parse_tokens(tokens) -> Expr:
    """Parse a token list into an Abstract Syntax Tree.

    Uses a fresh parser instance for each invocation, so no state leaks
    between formulas.

    Args:
        tokens: Token list produced by ``lex``

    Returns:
        Root AST node of the formula

    Raises:
        ParseError: The tokens do not form exactly one formula
    """
    return _FormulaParser().parse(tokens)


def parse(source: str) -> Expr:
    """Parse formula text into Abstract Syntax Tree representation.

    Args:
        source: Formula text to parse

    Returns:
        Root AST node representing the parsed formula structure

    Raises:
        LexError: Formula text violates a lexical policy
        ParseError: Formula syntax is malformed

    Example:
        >>> ast = parse("not a and b")
        >>> # Returns And node with Not(a) on the left and Atom b on the right
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    try:
        result = parse_tokens(lex(source))
        logger.debug(f"Formula parsed successfully: {result}")
        return result

    except FormulaError:
        logger.debug("Formula error encountered during parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


def parse_knowledge_base(sources: Iterable[str]) -> List[Expr]:
    """Parse every formula of a knowledge base.

    Args:
        sources: Formula strings, one per knowledge base entry

    Returns:
        Parsed formulas in input order

    Raises:
        KnowledgeBaseError: A formula fails to lex or parse; the original
            error is chained as the cause
    """
    logger = get_logger()
    formulas = []

    for index, source in enumerate(sources):
        try:
            formulas.append(parse(source))
        except FormulaError as exc:
            logger.debug(f"Knowledge base formula #{index + 1} rejected: {exc}")
            raise KnowledgeBaseError(index, source, str(exc)) from exc

    logger.debug(f"Knowledge base parsed: {len(formulas)} formula(s)")
    return formulas


__all__ = [
    "lex",
    "tokens_to_text",
    "parse",
    "parse_tokens",
    "parse_knowledge_base",
    "FormulaError",
    "LexError",
    "ParseError",
    "KnowledgeBaseError",
]

__version__ = "1.0.0"
__description__ = "Propositional formula lexing and parsing components"
