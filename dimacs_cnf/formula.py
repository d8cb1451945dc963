"""
CNF formula value and random formula generation.
"""

import random
from dataclasses import dataclass, field
from typing import List, Optional


# Empirically determined clause counts for balanced (phase transition) 3-SAT
BALANCED_CLAUSE_COUNTS = {
    3: 19, 4: 24, 5: 28, 6: 33, 7: 37, 8: 41, 9: 45, 10: 50,
    11: 54, 12: 58, 13: 63, 14: 67, 15: 71, 16: 76, 17: 79,
    18: 83, 19: 87, 20: 92
}


@dataclass
class CNFFormula:
    """
    A CNF formula in DIMACS terms.

    Variables are numbered 1..num_vars. A positive literal i is the positive
    occurrence of variable i and -i its negation. num_vars is the declared
    bound, not necessarily the number of variables actually used.
    """
    num_vars: int = 0
    clauses: List[List[int]] = field(default_factory=list)
    comments: List[str] = field(default_factory=list, compare=False)

    @property
    def num_clauses(self) -> int:
        return len(self.clauses)

    def max_var(self) -> int:
        """Largest variable index occurring in any clause (0 if none)."""
        return max((abs(lit) for clause in self.clauses for lit in clause), default=0)


def generate_random_formula(
    n_vars: int,
    clause_length: int = 3,
    variance: float = 0.1,
    n_clauses: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> CNFFormula:
    """
    Generate a random k-CNF formula near the phase transition.

    Args:
        n_vars: Number of variables.
        clause_length: Number of literals per clause (default 3 for 3-SAT).
        variance: Relative standard deviation in clause count (e.g., 0.1 = +/-10%).
        n_clauses: Fixed number of clauses. If None, uses phase transition estimate.
        rng: Random source; the module-level generator is used when omitted.

    Returns:
        A CNFFormula over variables 1..n_vars.
    """
    if clause_length > n_vars:
        raise ValueError(f"clause_length {clause_length} exceeds n_vars {n_vars}")
    rng = rng or random.Random()

    if n_clauses is None:
        base = BALANCED_CLAUSE_COUNTS.get(n_vars, int(n_vars * 4.26))
        delta = int(base * variance)
        n_clauses = rng.randint(base - delta, base + delta)

    variables = range(1, n_vars + 1)
    clauses = []
    for _ in range(n_clauses):
        clause_vars = rng.sample(variables, clause_length)
        clause = [var if rng.random() < 0.5 else -var for var in clause_vars]
        clauses.append(clause)

    return CNFFormula(num_vars=n_vars, clauses=clauses)
