"""
DIMACS CNF formatting utilities.

Produces canonical text: comment lines first, then "p cnf V C", then one
clause per line terminated by " 0".
"""

from typing import Iterable, List, Sequence, TextIO

from .formula import CNFFormula


def fmt_clause(clause: Sequence[int]) -> str:
    """Format clause: [1, -2, 3] -> '1 -2 3 0'"""
    return ' '.join([str(lit) for lit in clause] + ['0'])


def fmt_problem(n_vars: int, n_clauses: int, fmt: str = 'cnf') -> str:
    """Format problem line: (3, 4) -> 'p cnf 3 4'"""
    return f"p {fmt} {n_vars} {n_clauses}"


def fmt_comment(text: str) -> str:
    """Format comment: 'hello' -> 'c hello', '' -> 'c'"""
    if not text:
        return 'c'
    return f"c {text}"


def dimacs_lines(formula: CNFFormula, comments: Iterable[str] = ()) -> List[str]:
    """Lines of the DIMACS encoding of formula, without line terminators."""
    lines = [fmt_comment(text) for text in comments]
    lines.append(fmt_problem(formula.num_vars, len(formula.clauses)))
    lines.extend(fmt_clause(clause) for clause in formula.clauses)
    return lines


def format_cnf(formula: CNFFormula, comments: Iterable[str] = ()) -> str:
    """Format formula as a DIMACS CNF document."""
    return '\n'.join(dimacs_lines(formula, comments)) + '\n'


def write_cnf(formula: CNFFormula, stream: TextIO, comments: Iterable[str] = ()):
    """Write formula to stream in DIMACS CNF format."""
    for line in dimacs_lines(formula, comments):
        stream.write(line)
        stream.write('\n')
