# utils/formatting.py
# This file is part of Propcheck - Propositional Entailment by Enumeration
#
# Text helpers for command-line input and output

"""
Helpers shared by the command-line front end: splitting a knowledge-base
line into formulas and rendering tokens and reports as text.
"""

from typing import Iterable, List

from logic.assignments import format_assignment
from logic.entailment import SatisfiabilityReport


def split_knowledge_base(line: str) -> List[str]:
    """
    Split a comma-separated knowledge-base line into formula strings.

    Blank entries (``"a,,b"`` or a trailing comma) are dropped.
    """
    return [part.strip() for part in line.split(",") if part.strip()]


def format_tokens(tokens: Iterable) -> str:
    """
    Render tokens as ``[ATOM(a), AND, ATOM(b)]``.
    """
    rendered = [
        f"ATOM({token.value})" if token.type == "ATOM" else token.type
        for token in tokens
    ]
    return f"[{', '.join(rendered)}]"


def format_report(report: SatisfiabilityReport) -> List[str]:
    """
    Render a satisfiability report as output lines.
    """
    lines = [f"Satisfiable assignments ({len(report.satisfying)}):"]
    lines.extend(f"  {format_assignment(a)}" for a in report.satisfying)
    lines.append(f"Unsatisfiable assignments ({len(report.falsifying)}):")
    lines.extend(f"  {format_assignment(a)}" for a in report.falsifying)
    return lines
