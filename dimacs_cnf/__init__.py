"""
DIMACS CNF Reader Package

This package reads DIMACS CNF files, the plain-text format used to exchange
Boolean satisfiability instances. A streaming reader classifies each line and
pushes it to a pluggable builder; the default builder produces a CNFFormula.
"""

from .formula import CNFFormula, generate_random_formula
from .builder import Builder, BuilderState, FormulaBuilder, CommentCollector
from .reader import (
    ScanStats, read_builder, read_cnf, parse_cnf, load_cnf, read_comments,
    parse_problem_line, parse_clause_line,
)
from .format import fmt_clause, fmt_problem, fmt_comment, format_cnf, write_cnf
from .config import ReaderConfig, load_config
from .errors import (
    DimacsError, StreamError, StructuralError, OrderingError,
    CardinalityError, LiteralError, ParseCancelled, HaltParsing,
)

__all__ = [
    # Formula
    'CNFFormula',
    'generate_random_formula',

    # Builders
    'Builder',
    'BuilderState',
    'FormulaBuilder',
    'CommentCollector',

    # Reading
    'ScanStats',
    'read_builder',
    'read_cnf',
    'parse_cnf',
    'load_cnf',
    'read_comments',
    'parse_problem_line',
    'parse_clause_line',

    # Formatting
    'fmt_clause',
    'fmt_problem',
    'fmt_comment',
    'format_cnf',
    'write_cnf',

    # Configuration
    'ReaderConfig',
    'load_config',

    # Errors
    'DimacsError',
    'StreamError',
    'StructuralError',
    'OrderingError',
    'CardinalityError',
    'LiteralError',
    'ParseCancelled',
    'HaltParsing',
]
