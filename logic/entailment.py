# logic/entailment.py
# This file is part of Propcheck - Propositional Entailment by Enumeration
#
# Satisfiability reports and knowledge-base entailment by enumeration

"""Satisfiability and entailment checking over enumerated assignments.

Both checks collect the atom universe of the formulas involved, enumerate
every assignment over it once, and evaluate each formula per assignment.

Satisfiability report:
    Splits the assignments of a single formula into those that make it true
    and those that make it false, keeping enumeration order in both lists.

Entailment (KB ⊨ α):
    Holds when every assignment that makes all knowledge-base formulas true
    also makes α true. Assignments falsifying a knowledge-base formula are
    skipped, so an inconsistent knowledge base entails everything and an
    empty one entails exactly the valid formulas. The first assignment that
    satisfies the knowledge base but not α is kept as a counter-model.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional, Sequence

from parser import parse, parse_knowledge_base
from parser.ast_nodes import Expr
from .assignments import (
    Assignment,
    enumerate_assignments,
    iter_assignments,
    format_assignment,
)
from .atoms import collect_atoms
from .config import DEFAULT_CONFIG, EngineConfig
from .evaluator import evaluate
from utils.logger import get_logger


@dataclass(slots=True)
class SatisfiabilityReport:
    """Partition of all assignments of a formula by truth value.

    Attributes:
        formula: The formula that was checked
        atoms: Atom universe of the formula
        satisfying: Assignments under which the formula is true
        falsifying: Assignments under which the formula is false
    """

    formula: Expr
    atoms: FrozenSet[str]
    satisfying: List[Assignment] = field(default_factory=list)
    falsifying: List[Assignment] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.satisfying) + len(self.falsifying)

    @property
    def is_satisfiable(self) -> bool:
        return bool(self.satisfying)

    @property
    def is_valid(self) -> bool:
        return not self.falsifying


@dataclass(slots=True)
class EntailmentResult:
    """Outcome of a KB ⊨ α check.

    Truthy exactly when the entailment holds.

    Attributes:
        entails: Whether every model of the knowledge base satisfies α
        atoms: Shared atom universe of the knowledge base and α
        models_checked: Number of knowledge-base models α was evaluated on
        counter_model: An assignment satisfying the knowledge base but not α
    """

    entails: bool
    atoms: FrozenSet[str]
    models_checked: int = 0
    counter_model: Optional[Assignment] = None

    def __bool__(self) -> bool:
        return self.entails


def _limit(config: Optional[EngineConfig]) -> int:
    return (config or DEFAULT_CONFIG).max_atoms


def satisfiability_report(
    formula: Expr, config: Optional[EngineConfig] = None
) -> SatisfiabilityReport:
    """Evaluate ``formula`` under every assignment over its own atoms.

    Args:
        formula: Parsed formula
        config: Engine configuration (atom limit)

    Returns:
        Report with satisfying and falsifying assignments

    Raises:
        ResourceLimitExceeded: The formula has more atoms than the limit
    """
    logger = get_logger()
    atoms = collect_atoms(formula)
    report = SatisfiabilityReport(formula=formula, atoms=atoms)

    for assignment in enumerate_assignments(atoms, _limit(config)):
        verdict = evaluate(formula, assignment)
        logger.assignment_checked(format_assignment(assignment), verdict)
        if verdict:
            report.satisfying.append(assignment)
        else:
            report.falsifying.append(assignment)

    logger.debug(
        f"Satisfiability of {formula}: {len(report.satisfying)}/{report.total} "
        f"assignment(s) satisfy it"
    )
    return report


def models(
    formulas: Sequence[Expr],
    atoms: Optional[Iterable[str]] = None,
    config: Optional[EngineConfig] = None,
) -> List[Assignment]:
    """Return the assignments that make every formula true.

    Args:
        formulas: Formulas that must all hold
        atoms: Atom universe to enumerate; defaults to the atoms of ``formulas``
        config: Engine configuration (atom limit)

    Raises:
        ResourceLimitExceeded: The universe has more atoms than the limit
    """
    universe = collect_atoms(*formulas) if atoms is None else frozenset(atoms)
    return [
        assignment
        for assignment in enumerate_assignments(universe, _limit(config))
        if all(evaluate(formula, assignment) for formula in formulas)
    ]


def check_entailment(
    knowledge_base: Sequence[Expr],
    query: Expr,
    config: Optional[EngineConfig] = None,
) -> EntailmentResult:
    """Decide KB ⊨ α by enumerating the shared atom universe once.

    Args:
        knowledge_base: Parsed knowledge-base formulas
        query: Parsed formula α
        config: Engine configuration (atom limit)

    Returns:
        EntailmentResult, with a counter-model when the entailment fails

    Raises:
        ResourceLimitExceeded: The shared universe has more atoms than the limit
    """
    logger = get_logger()
    atoms = collect_atoms(*knowledge_base, query)
    logger.debug(f"Entailment universe: {sorted(atoms)}")

    result = EntailmentResult(entails=True, atoms=atoms)
    for assignment in iter_assignments(atoms, _limit(config)):
        if not all(evaluate(formula, assignment) for formula in knowledge_base):
            continue

        result.models_checked += 1
        if not evaluate(query, assignment):
            result.entails = False
            result.counter_model = assignment
            logger.counter_model_found(format_assignment(assignment))
            break

    logger.debug(
        f"Entailment {'holds' if result.entails else 'fails'} after "
        f"{result.models_checked} knowledge-base model(s)"
    )
    return result


def entails(
    knowledge_base: Sequence[Expr],
    query: Expr,
    config: Optional[EngineConfig] = None,
) -> bool:
    """Return True iff KB ⊨ α."""
    return check_entailment(knowledge_base, query, config).entails


def check_entailment_text(
    knowledge_base: Iterable[str],
    query: str,
    config: Optional[EngineConfig] = None,
) -> EntailmentResult:
    """Parse formula strings and decide KB ⊨ α.

    Raises:
        KnowledgeBaseError: A knowledge-base formula is malformed
        LexError, ParseError: The query is malformed
        ResourceLimitExceeded: The shared universe has more atoms than the limit
    """
    formulas = parse_knowledge_base(knowledge_base)
    return check_entailment(formulas, parse(query), config)
