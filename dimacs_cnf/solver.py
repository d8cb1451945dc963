"""
Feed a DIMACS file straight into a PySAT solver.

The clauses are passed to the solver as they are read, so no CNFFormula is
ever materialized.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from .errors import CardinalityError, OrderingError
from .reader import read_builder

logger = logging.getLogger(__name__)


class SolverBuilder:
    """
    Builder adding every clause to a PySAT solver.

    Args:
        name: PySAT solver name (e.g. "g3" for Glucose3, "cd" for CaDiCaL).
    """

    def __init__(self, name: str = "g3"):
        from pysat.solvers import Solver

        self.solver = Solver(name=name)
        self.n_vars: Optional[int] = None
        self.declared_clauses = 0
        self.n_clauses = 0

    def problem(self, fmt: str, n_vars: int, n_clauses: int) -> None:
        if self.n_vars is not None:
            raise OrderingError("duplicate problem line")
        self.n_vars = n_vars
        self.declared_clauses = n_clauses

    def clause(self, literals: Sequence[int]) -> None:
        if self.n_vars is None:
            raise OrderingError("clause found before problem line")
        self.solver.add_clause(list(literals))
        self.n_clauses += 1

    def comment(self, line: str) -> None:
        pass

    def finish(self):
        if self.n_vars is None:
            raise OrderingError("no problem line found")
        if self.n_clauses != self.declared_clauses:
            raise CardinalityError(
                f"mismatched clause count: expected {self.declared_clauses}, got {self.n_clauses}",
                expected=self.declared_clauses,
                actual=self.n_clauses,
            )
        return self.solver

    def close(self):
        self.solver.delete()


def solve_cnf(stream: Iterable[str], name: str = "g3") -> Optional[List[int]]:
    """
    Solve the DIMACS CNF instance read from stream.

    Returns:
        A satisfying model as a list of literals, or None if unsatisfiable.
    """
    builder = SolverBuilder(name)
    try:
        read_builder(stream, builder)
        solver = builder.finish()
        logger.debug("Solving %d clauses over %d variables", builder.n_clauses, builder.n_vars)
        if solver.solve():
            return solver.get_model()
        return None
    finally:
        builder.close()
