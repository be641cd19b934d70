# tests/logic_tests/test_evaluator.py

import itertools

import pytest
from parser import parse
from parser.ast_nodes import Atom, Not, And, Or, If, Iff
from logic import evaluate, enumerate_assignments


SUBFORMULAS = [
    Atom("a"),
    Not(Atom("b")),
    Or(Atom("a"), Atom("c")),
    If(Atom("b"), Atom("c")),
    Iff(Atom("a"), Not(Atom("c"))),
]

ASSIGNMENTS = enumerate_assignments({"a", "b", "c"})


@pytest.mark.parametrize(
    "x, y", list(itertools.product(SUBFORMULAS, repeat=2))
)
def test_evaluation_is_compositional(x, y):
    """Every connective is a function of its operands' values."""
    for assignment in ASSIGNMENTS:
        vx = evaluate(x, assignment)
        vy = evaluate(y, assignment)

        assert evaluate(Not(x), assignment) == (not vx)
        assert evaluate(And(x, y), assignment) == (vx and vy)
        assert evaluate(Or(x, y), assignment) == (vx or vy)
        assert evaluate(If(x, y), assignment) == ((not vx) or vy)
        assert evaluate(Iff(x, y), assignment) == (vx == vy)


@pytest.mark.parametrize(
    "left, right, expected",
    [
        (False, False, True),
        (False, True, True),
        (True, False, False),
        (True, True, True),
    ],
)
def test_material_implication_truth_table(left, right, expected):
    assert evaluate(parse("if p then q"), {"p": left, "q": right}) is expected


@pytest.mark.parametrize(
    "left, right, expected",
    [
        (False, False, True),
        (False, True, False),
        (True, False, False),
        (True, True, True),
    ],
)
def test_biconditional_truth_table(left, right, expected):
    assert evaluate(parse("iff p then q"), {"p": left, "q": right}) is expected


def test_missing_atom_is_false():
    """Atoms outside the assignment evaluate to false instead of failing."""
    assert evaluate(Atom("unknown"), {}) is False
    assert evaluate(parse("not unknown"), {"a": True}) is True
    assert evaluate(parse("a and unknown"), {"a": True}) is False


def test_evaluation_returns_bool():
    assert isinstance(evaluate(parse("a or b"), {"a": True, "b": False}), bool)
