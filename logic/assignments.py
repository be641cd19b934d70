# logic/assignments.py
# This file is part of Propcheck - Propositional Entailment by Enumeration
#
# Exhaustive truth-assignment enumeration

"""
Generates every truth assignment over a set of atoms.

Atoms are sorted once per run and atom ``i`` of that order is true in
combination ``c`` exactly when bit ``i`` of ``c`` is set, so the same atom
keeps the same bit for every assignment of a run. For ``n`` atoms the run
yields the ``2^n`` combinations ``0 .. 2^n - 1`` in increasing order; an
empty atom set yields a single empty assignment.
"""

from __future__ import annotations
from typing import Dict, Iterable, Iterator, List, Optional

from .config import DEFAULT_CONFIG
from .exceptions import ResourceLimitExceeded
from utils.logger import get_logger

Assignment = Dict[str, bool]


def check_atom_limit(atom_count: int, max_atoms: Optional[int] = None) -> None:
    """
    Raise ResourceLimitExceeded when ``atom_count`` atoms cannot be enumerated.
    """
    limit = DEFAULT_CONFIG.max_atoms if max_atoms is None else max_atoms
    if atom_count > limit:
        raise ResourceLimitExceeded(atom_count, limit)


def iter_assignments(
    atoms: Iterable[str], max_atoms: Optional[int] = None
) -> Iterator[Assignment]:
    """
    Lazily yield all assignments over ``atoms``.

    The limit is checked before the first assignment is produced.
    """
    ordered = sorted(set(atoms))
    check_atom_limit(len(ordered), max_atoms)
    return _generate(ordered)


def _generate(ordered: List[str]) -> Iterator[Assignment]:
    for combination in range(1 << len(ordered)):
        yield {
            name: bool(combination & (1 << position))
            for position, name in enumerate(ordered)
        }


def enumerate_assignments(
    atoms: Iterable[str], max_atoms: Optional[int] = None
) -> List[Assignment]:
    """
    Return the full list of ``2^|atoms|`` assignments over ``atoms``.
    """
    ordered = sorted(set(atoms))
    check_atom_limit(len(ordered), max_atoms)
    assignments = list(_generate(ordered))
    get_logger().assignments_generated(len(ordered), len(assignments))
    return assignments


def format_assignment(assignment: Assignment) -> str:
    """
    Render an assignment as ``a=True, b=False`` in atom order.
    """
    if not assignment:
        return "{}"
    return ", ".join(f"{name}={assignment[name]}" for name in sorted(assignment))
