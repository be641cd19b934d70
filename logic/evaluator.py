# logic/evaluator.py
# This file is part of Propcheck - Propositional Entailment by Enumeration
#
# Truth-value evaluation of formula trees

"""
Evaluates a formula tree under one truth assignment.

Evaluation is total: an atom missing from the assignment counts as false,
which lets a formula be checked against an assignment generated for a
different atom universe. Both operands of a binary connective are always
evaluated.
"""

from __future__ import annotations
from typing import Mapping

from parser import ast_nodes as ast


class Evaluator(ast.Visitor):
    """Visitor computing the truth value of a formula under an assignment."""

    def __init__(self, assignment: Mapping[str, bool]):
        self.assignment = assignment

    def evaluate(self, formula: ast.Expr) -> bool:
        return formula.accept(self)

    def visit_atom(self, n: ast.Atom) -> bool:
        return self.assignment.get(n.name, False)

    def visit_not(self, n: ast.Not) -> bool:
        return not n.operand.accept(self)

    def visit_and(self, n: ast.And) -> bool:
        left = n.left.accept(self)
        right = n.right.accept(self)
        return left and right

    def visit_or(self, n: ast.Or) -> bool:
        left = n.left.accept(self)
        right = n.right.accept(self)
        return left or right

    def visit_if(self, n: ast.If) -> bool:
        antecedent = n.antecedent.accept(self)
        consequent = n.consequent.accept(self)
        return not antecedent or consequent

    def visit_iff(self, n: ast.Iff) -> bool:
        left = n.left.accept(self)
        right = n.right.accept(self)
        # Conjunction of both implications
        return (not left or right) and (left or not right)


def evaluate(formula: ast.Expr, assignment: Mapping[str, bool]) -> bool:
    """
    Truth value of ``formula`` under ``assignment``; unknown atoms are false.
    """
    return Evaluator(assignment).evaluate(formula)
