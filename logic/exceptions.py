# logic/exceptions.py
# This file is part of Propcheck - Propositional Entailment by Enumeration
#
# Exceptions raised by the enumeration engine

"""Exceptions raised by the enumeration engine.

Evaluation is total and never raises; the only failure of the engine is an
atom universe too large to enumerate.
"""


class ResourceLimitExceeded(RuntimeError):
    """Exception raised when an atom set exceeds the enumeration limit.

    Attributes:
        atom_count: Number of distinct atoms requested
        limit: Largest atom count the engine is configured to enumerate
    """

    def __init__(self, atom_count: int, limit: int):
        self.atom_count = atom_count
        self.limit = limit
        super().__init__(
            f"Cannot enumerate {atom_count} atoms: limit is {limit} "
            f"({2 ** limit} assignments)"
        )
