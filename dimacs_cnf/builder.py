"""
Builders receive the events produced by the DIMACS reader.

A builder is anything with problem/clause/comment methods; the reader calls
them in the same order as the corresponding lines appear in the file.
"""

from enum import Enum, auto
from typing import AbstractSet, List, Optional, Protocol, Sequence

from .errors import (
    CardinalityError, HaltParsing, LiteralError, OrderingError, StructuralError
)
from .formula import CNFFormula


class Builder(Protocol):
    """Sink for parsed DIMACS lines."""

    def problem(self, fmt: str, n_vars: int, n_clauses: int) -> None:
        """Process the problem line. fmt is the format tag, e.g. "cnf"."""

    def clause(self, literals: Sequence[int]) -> None:
        """
        Process a clause line.

        literals is a read-only view over a buffer shared between calls. It is
        released when this method returns: copy what you need, never keep it.
        """

    def comment(self, line: str) -> None:
        """
        Process a comment line. The line always starts with the comment
        prefix "c", which is useful to pick up extra information stored in
        comments (problem origin, solver hints, ...).
        """


class BuilderState(Enum):
    """Lifecycle of a FormulaBuilder."""
    EMPTY = auto()
    HAS_PROBLEM = auto()
    DONE = auto()
    REJECTED = auto()


class FormulaBuilder:
    """
    Reference builder accumulating events into a CNFFormula.

    problem() and clause() enforce ordering, uniqueness, the accepted format
    tags and the upper bound on clauses. The lower bound can only be checked
    once the input is exhausted, which is what finish() does.

    Clauses are appended as they arrive, so formula always holds the clauses
    read so far; only the value returned by finish() is validated.
    """

    def __init__(
        self,
        accepted_formats: AbstractSet[str] = frozenset({"cnf"}),
        keep_comments: bool = False,
        check_bounds: bool = False,
    ):
        self.accepted_formats = accepted_formats
        self.keep_comments = keep_comments
        self.check_bounds = check_bounds
        self.formula = CNFFormula()
        self.state = BuilderState.EMPTY
        self.declared = 0
        self.n_clauses = 0

    def _reject(self, exc: Exception):
        self.state = BuilderState.REJECTED
        raise exc

    def _check_open(self):
        if self.state is BuilderState.REJECTED:
            raise OrderingError("builder already rejected its input")
        if self.state is BuilderState.DONE:
            raise OrderingError("builder already finished")

    def problem(self, fmt: str, n_vars: int, n_clauses: int) -> None:
        self._check_open()
        if self.state is BuilderState.HAS_PROBLEM:
            self._reject(OrderingError("duplicate problem line"))
        if fmt not in self.accepted_formats:
            self._reject(StructuralError(f"unsupported format {fmt!r}"))
        if n_vars < 0:
            self._reject(StructuralError(f"invalid number of variables: {n_vars}"))
        if n_clauses < 0:
            self._reject(StructuralError(f"invalid number of clauses: {n_clauses}"))

        self.formula.num_vars = n_vars
        self.formula.clauses = []
        self.declared = n_clauses
        self.n_clauses = 0
        self.state = BuilderState.HAS_PROBLEM

    def clause(self, literals: Sequence[int]) -> None:
        self._check_open()
        if self.state is BuilderState.EMPTY:
            self._reject(OrderingError("clause found before problem line"))
        expected = self.declared
        if self.n_clauses >= expected:
            self._reject(CardinalityError(
                f"too many clauses: expected {expected}",
                expected=expected,
                actual=self.n_clauses + 1,
            ))

        clause = list(literals)
        if self.check_bounds:
            num_vars = self.formula.num_vars
            for lit in clause:
                if abs(lit) > num_vars:
                    self._reject(LiteralError(
                        f"literal {lit} out of range for {num_vars} variables"
                    ))

        self.formula.clauses.append(clause)
        self.n_clauses += 1

    def comment(self, line: str) -> None:
        self._check_open()
        if self.keep_comments:
            self.formula.comments.append(line)

    def finish(self) -> CNFFormula:
        """
        Validate the accumulated formula at end of input and return it.

        Raises:
            OrderingError: No problem line was seen.
            CardinalityError: Fewer clauses than declared were seen.
        """
        self._check_open()
        if self.state is BuilderState.EMPTY:
            self._reject(OrderingError("no problem line found"))
        expected = self.declared
        if self.n_clauses != expected:
            self._reject(CardinalityError(
                f"mismatched clause count: expected {expected}, got {self.n_clauses}",
                expected=expected,
                actual=self.n_clauses,
            ))
        self.state = BuilderState.DONE
        return self.formula


class CommentCollector:
    """
    Builder that only keeps comment lines, e.g. to read metadata headers.

    With stop_at_problem set it halts the scan on the problem line, so the
    clause section of large files is never read.
    """

    def __init__(self, stop_at_problem: bool = True):
        self.stop_at_problem = stop_at_problem
        self.comments: List[str] = []
        self.problem_line: Optional[tuple] = None

    def problem(self, fmt: str, n_vars: int, n_clauses: int) -> None:
        self.problem_line = (fmt, n_vars, n_clauses)
        if self.stop_at_problem:
            raise HaltParsing()

    def clause(self, literals: Sequence[int]) -> None:
        pass

    def comment(self, line: str) -> None:
        self.comments.append(line)
