# logic/__init__.py

"""Truth-table engine for propositional formulas.

This package provides:
  • collect_atoms: atom universe of one or more formulas
  • enumerate_assignments / iter_assignments: all 2^n truth assignments
  • evaluate: truth value of a formula under one assignment
  • satisfiability_report: satisfying / falsifying split of a formula
  • check_entailment / entails: KB ⊨ α by exhaustive enumeration
  • EngineConfig: atom limit guarding enumeration
  • ResourceLimitExceeded: raised when the atom limit is exceeded
"""

from .atoms import collect_atoms
from .assignments import (
    Assignment,
    enumerate_assignments,
    iter_assignments,
    format_assignment,
)
from .config import DEFAULT_MAX_ATOMS, EngineConfig
from .evaluator import evaluate
from .entailment import (
    EntailmentResult,
    SatisfiabilityReport,
    check_entailment,
    check_entailment_text,
    entails,
    models,
    satisfiability_report,
)
from .exceptions import ResourceLimitExceeded

__all__ = [
    "collect_atoms",
    "Assignment",
    "enumerate_assignments",
    "iter_assignments",
    "format_assignment",
    "DEFAULT_MAX_ATOMS",
    "EngineConfig",
    "evaluate",
    "EntailmentResult",
    "SatisfiabilityReport",
    "check_entailment",
    "check_entailment_text",
    "entails",
    "models",
    "satisfiability_report",
    "ResourceLimitExceeded",
]
