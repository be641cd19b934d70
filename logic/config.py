# logic/config.py
# This file is part of Propcheck - Propositional Entailment by Enumeration
#
# Engine configuration for truth-assignment enumeration

"""
Configuration for the enumeration engine.

Enumeration costs O(2^n · n) time and memory for n atoms, so the number of
atoms a single run may cover is capped. The cap is the only tunable of the
engine; the command line sets it through ``--max-atoms``.
"""

from __future__ import annotations
from dataclasses import dataclass

DEFAULT_MAX_ATOMS = 20


@dataclass(frozen=True, slots=True)
class EngineConfig:
    max_atoms: int = DEFAULT_MAX_ATOMS

    def __post_init__(self):
        if self.max_atoms < 0:
            raise ValueError(f"max_atoms must be non-negative, got {self.max_atoms}")


DEFAULT_CONFIG = EngineConfig()
