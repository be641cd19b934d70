# logic/atoms.py
# This file is part of Propcheck - Propositional Entailment by Enumeration
#
# Atom collection over formula trees

"""
Collects the propositional atoms referenced by one or more formulas.

Entailment needs one shared atom universe, so formulas are visited one by
one and their atom names unioned before any assignment is generated.
"""

from __future__ import annotations
from typing import FrozenSet, Set

from parser import ast_nodes as ast


class AtomCollector(ast.Visitor):
    """Visitor gathering atom names at the leaves of a formula tree."""

    def __init__(self):
        self.atoms: Set[str] = set()

    def collect(self, formula: ast.Expr) -> AtomCollector:
        formula.accept(self)
        return self

    def visit_atom(self, n: ast.Atom):
        self.atoms.add(n.name)

    def visit_not(self, n: ast.Not):
        n.operand.accept(self)

    def visit_and(self, n: ast.And):
        n.left.accept(self)
        n.right.accept(self)

    def visit_or(self, n: ast.Or):
        n.left.accept(self)
        n.right.accept(self)

    def visit_if(self, n: ast.If):
        n.antecedent.accept(self)
        n.consequent.accept(self)

    def visit_iff(self, n: ast.Iff):
        n.left.accept(self)
        n.right.accept(self)


def collect_atoms(*formulas: ast.Expr) -> FrozenSet[str]:
    """
    Return the distinct atom names appearing in any of the given formulas.
    """
    collector = AtomCollector()
    for formula in formulas:
        collector.collect(formula)
    return frozenset(collector.atoms)
