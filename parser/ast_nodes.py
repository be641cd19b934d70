# parser/ast_nodes.py
# This file is part of Propcheck - Propositional Entailment by Enumeration
#
# Abstract Syntax Tree node classes for propositional formula representation

"""AST node classes for representing parsed propositional formulas.

This module defines immutable and hashable node classes used to construct tree
representations of propositional formulas. The node set is closed: an atom,
negation, conjunction, disjunction, material implication and biconditional.
Trees are built bottom-up by the parser and never mutated afterwards.

Node Types:
    Atom: Propositional variable
    Not, And, Or: Standard Boolean connectives
    If: Material implication (``if a then b``)
    Iff: Biconditional (``iff a then b``)

All nodes support the visitor design pattern for traversal, and ``str`` renders
each node in the input syntax so that the result parses back to an equal tree.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol, Union


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each AST node type
    so that every consumer handles the complete set of formula shapes.
    """

    def visit_atom(self, n: Atom): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...

    def visit_if(self, n: If): ...

    def visit_iff(self, n: Iff): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all AST nodes in propositional formulas.

    Provides the foundation for immutable expression trees with visitor pattern
    support. All concrete node types inherit from this class and must implement
    the accept method for visitor dispatch and __str__ for string representation.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Atom(Expr):
    """Propositional variable, the only leaf of a formula tree.

    Attributes:
        name: Alphabetic identifier of the atom
    """

    name: str

    def accept(self, v: Visitor):
        return v.visit_atom(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation of a single operand.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_not(self)

    def __str__(self) -> str:
        return f"not {self.operand}"


@dataclass(frozen=True, slots=True)
class And(Expr):
    """Logical conjunction, true when both operands are true.

    Attributes:
        left: Left operand of the conjunction
        right: Right operand of the conjunction
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_and(self)

    def __str__(self) -> str:
        return f"({self.left} and {self.right})"


@dataclass(frozen=True, slots=True)
class Or(Expr):
    """Logical disjunction, true when at least one operand is true.

    Attributes:
        left: Left operand of the disjunction
        right: Right operand of the disjunction
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_or(self)

    def __str__(self) -> str:
        return f"({self.left} or {self.right})"


@dataclass(frozen=True, slots=True)
class If(Expr):
    """Material implication, false only when the antecedent holds and the
    consequent does not.

    Attributes:
        antecedent: Condition of the implication
        consequent: Conclusion of the implication
    """

    antecedent: Expr
    consequent: Expr

    def accept(self, v: Visitor):
        return v.visit_if(self)

    def __str__(self) -> str:
        return f"(if {self.antecedent} then {self.consequent})"


@dataclass(frozen=True, slots=True)
class Iff(Expr):
    """Biconditional, true when both sides have the same truth value.

    Attributes:
        left: Left side of the biconditional
        right: Right side of the biconditional
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_iff(self)

    def __str__(self) -> str:
        return f"(iff {self.left} then {self.right})"


# Closed set of formula shapes produced by the parser
Formula = Union[Atom, Not, And, Or, If, Iff]
