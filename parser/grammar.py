# parser/grammar.py
# This file is part of Propcheck - Propositional Entailment by Enumeration
#
# LALR(1) grammar and parser for propositional formulas using SLY

"""Propositional formula grammar implementation using SLY parser generator.

This module defines the grammar rules and parsing logic for propositional
formulas. The parser constructs Abstract Syntax Trees from the token lists
produced by ``lexer.lex`` and reports malformed input with a specific reason.

Grammar Features:
- AND and OR share a single precedence level and fold left in the order they
  appear, so ``a and b or c`` is ``(a and b) or c`` and ``a or b and c`` is
  ``(a or b) and c``
- NOT applies to exactly one primary: ``not a and b`` is ``(not a) and b``
- ``if``/``iff`` conditionals are primaries whose ``then`` branch extends as
  far right as possible: ``if a then b and c`` is ``if a then (b and c)``
- Parenthetical grouping for precedence override

Grammar:
    formula : expr
    expr    : expr AND primary | expr OR primary | primary
    primary : ATOM | NOT primary | LPAREN expr RPAREN
            | IF expr THEN expr | IFF expr THEN expr
"""

from typing import Iterator, List

from sly import Parser
from sly.lex import Token

from .lexer import FormulaLexer
from .ast_nodes import Expr, Atom, Not, And, Or, If, Iff
from .exceptions import ParseError
from utils.logger import get_logger


# Tokens after which the grammar requires a primary
_EXPECTS_PRIMARY = {None, "AND", "OR", "NOT", "LPAREN", "IF", "IFF", "THEN"}


class _FormulaParser(Parser):
    """SLY-based LALR(1) parser for propositional formulas.

    Implements grammar rules to construct AST nodes from token lists.
    The only grammar conflict, whether a binary operator after a ``then``
    branch extends that branch or the enclosing expression, is resolved by
    giving AND/OR a higher precedence than THEN so the parser always shifts.

    Attributes:
        tokens: Token types from FormulaLexer
        precedence: Operator precedence and associativity rules
    """

    tokens = FormulaLexer.tokens

    precedence = (
        ("right", "THEN"),
        ("left", "AND", "OR"),
    )

    def __init__(self):
        self._tokens: List[Token] = []
        self._position = 0

    @_("expr")
    def formula(self, p) -> Expr:
        """Start rule: complete formula is a single expression."""
        return p.expr

    # Binary chains, folded left in encounter order
    @_("expr AND primary")
    def expr(self, p) -> Expr:
        """Conjunction operator."""
        return And(p.expr, p.primary)

    @_("expr OR primary")
    def expr(self, p) -> Expr:
        """Disjunction operator."""
        return Or(p.expr, p.primary)

    @_("primary")
    def expr(self, p) -> Expr:
        return p.primary

    # Primaries
    @_("ATOM")
    def primary(self, p) -> Expr:
        """Propositional variable."""
        return Atom(p.ATOM)

    @_("NOT primary")
    def primary(self, p) -> Expr:
        """Negation of the immediately following primary."""
        return Not(p.primary)

    @_("LPAREN expr RPAREN")
    def primary(self, p) -> Expr:
        """Parenthesized expression for grouping."""
        return p.expr

    @_("IF expr THEN expr")
    def primary(self, p) -> Expr:
        """Material implication."""
        return If(p.expr0, p.expr1)

    @_("IFF expr THEN expr")
    def primary(self, p) -> Expr:
        """Biconditional."""
        return Iff(p.expr0, p.expr1)

    def parse(self, tokens: List[Token]) -> Expr:
        """Parse a token list into an AST.

        Args:
            tokens: Tokens produced by ``lex``

        Returns:
            Root AST node representing the parsed formula

        Raises:
            ParseError: If the token list is empty or violates the grammar
        """
        logger = get_logger()

        if not tokens:
            raise ParseError("Input formula is empty: expected expression")

        self._tokens = list(tokens)
        self._position = 0

        try:
            ast_result = super().parse(self._feed())

            if ast_result is None:
                raise ParseError("Failed to parse formula (syntax error).")

            logger.debug(
                f"Successfully parsed formula into {type(ast_result).__name__}"
            )
            return ast_result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def _feed(self) -> Iterator[Token]:
        """Yield tokens while tracking the index of the current lookahead."""
        for position, token in enumerate(self._tokens):
            self._position = position
            yield token
        self._position = len(self._tokens)

    def error(self, token):
        """Handle syntax errors during parsing.

        Called automatically by SLY on the first token that cannot continue
        the formula, or with None at end of input. The tokens consumed so far
        tell what the grammar was waiting for.

        Args:
            token: Problematic token or None for end of input

        Raises:
            ParseError: Always raises with a description of the problem
        """
        consumed = self._tokens[: self._position]
        previous = consumed[-1].type if consumed else None
        where = (
            "at end of formula"
            if token is None
            else f"near '{token.value}' at position {token.index}"
        )

        if previous in _EXPECTS_PRIMARY:
            if token is not None and token.type == "THEN":
                raise ParseError(
                    f"Unexpected 'then' keyword {where}: expected expression"
                )
            raise ParseError(f"Syntax error: expected expression {where}")

        pending = _innermost_open(consumed)
        if pending == "paren":
            raise ParseError(f"Syntax error: missing closing parenthesis {where}")
        if pending == "if":
            raise ParseError(f"Syntax error: expected 'then' keyword {where}")

        raise ParseError(f"Syntax error: unexpected '{token.value}' {where}")


def _innermost_open(consumed: List[Token]):
    """Return the innermost construct still waiting to be closed.

    Parentheses close with RPAREN and conditionals close with THEN; a ``then``
    branch needs no explicit terminator and is skipped.

    Returns:
        "paren", "if" or None when nothing is pending
    """
    stack = []
    for token in consumed:
        if token.type == "LPAREN":
            stack.append("paren")
        elif token.type in ("IF", "IFF"):
            stack.append("if")
        elif token.type == "THEN":
            if stack and stack[-1] == "if":
                stack[-1] = "then"
        elif token.type == "RPAREN":
            while stack and stack[-1] == "then":
                stack.pop()
            if stack and stack[-1] == "paren":
                stack.pop()

    for construct in reversed(stack):
        if construct != "then":
            return construct
    return None
