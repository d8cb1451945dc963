"""
Streaming reader for DIMACS CNF files.

The reader walks the input one line at a time, classifies every non-blank
line by its first character and hands it to a builder:

    c ...            comment, forwarded verbatim
    p cnf V C        problem line
    %                legacy end-of-instance marker, stops the scan
                     (only valid after the problem line)
    anything else    clause line, integers optionally terminated by 0

Only the syntax of each line is checked here. Semantic rules (one problem
line, problem before clauses, clause counts, accepted formats) belong to the
builder, see FormulaBuilder.
"""

import io
import logging
import re
from array import array
from dataclasses import dataclass
from pathlib import Path
from typing import AbstractSet, Iterable, List, Optional, Protocol, Tuple, Union

from .builder import Builder, CommentCollector, FormulaBuilder
from .config import ReaderConfig
from .errors import HaltParsing, LiteralError, ParseCancelled, StreamError, StructuralError
from .formula import CNFFormula

logger = logging.getLogger(__name__)

INT_PATTERN = re.compile(r"[+-]?[0-9]+\Z")

# Typecode for the shared clause buffer (signed 64-bit)
CLAUSE_TYPECODE = "q"


class CancelToken(Protocol):
    """Anything with is_set(), e.g. threading.Event."""

    def is_set(self) -> bool:
        ...


@dataclass
class ScanStats:
    """Summary of one call to read_builder."""
    lines: int = 0
    comments: int = 0
    problems: int = 0
    clauses: int = 0
    literals: int = 0
    halted: bool = False
    end_marker: bool = False


def parse_problem_line(line: str, lineno: int = -1) -> Tuple[str, int, int]:
    """
    Parse a problem line.

    Format: p <format> <n_vars> <n_clauses>

    Returns:
        Tuple of (format tag, number of variables, number of clauses).
        Counts are returned as written, sign included.
    """
    parts = line.split()
    if len(parts) != 4 or parts[0] != "p":
        raise StructuralError("invalid problem line", line, lineno)
    fmt, n_vars, n_clauses = parts[1:]
    if not INT_PATTERN.match(n_vars):
        raise StructuralError(f"invalid number of variables {n_vars!r}", line, lineno)
    if not INT_PATTERN.match(n_clauses):
        raise StructuralError(f"invalid number of clauses {n_clauses!r}", line, lineno)
    return fmt, int(n_vars), int(n_clauses)


def parse_clause_line(line: str, buf: array, lineno: int = -1) -> array:
    """
    Parse the literals of a clause line into buf, replacing its contents.

    A 0 may only appear as the last token; it terminates the clause and is
    not stored.
    """
    del buf[:]
    parts = line.split()
    last = len(parts) - 1
    for i, token in enumerate(parts):
        if not INT_PATTERN.match(token):
            raise LiteralError(f"invalid literal {token!r} in clause", line, lineno)
        lit = int(token)
        if lit == 0:
            if i != last:
                raise LiteralError("zero found before end of clause line", line, lineno)
            break
        try:
            buf.append(lit)
        except OverflowError:
            raise LiteralError(f"literal {token} out of range", line, lineno) from None
    return buf


def read_builder(
    stream: Iterable[str],
    builder: Builder,
    cancel: Optional[CancelToken] = None,
) -> ScanStats:
    """
    Read DIMACS CNF text from stream and feed it to builder.

    Builder methods are called in the same order as the corresponding lines
    (comment, problem, clause) appear in the input. Any exception raised by
    the builder aborts the scan and propagates unchanged, except HaltParsing
    which ends it successfully.

    A "%" line ends the instance: every line after it is dropped, wherever
    it appears after the problem line. A "%" before the problem line is a
    StructuralError.

    Failures while pulling lines from stream (OSError, decode errors) are
    raised as StreamError with the original exception as __cause__; callers
    catching OSError directly will not see them.

    Args:
        stream: Text stream or any iterable of lines.
        builder: Receiver of the parsed lines.
        cancel: Optional token checked once per line.

    Returns:
        ScanStats describing what was read.
    """
    stats = ScanStats()
    clause_buf = array(CLAUSE_TYPECODE)
    lines = iter(stream)

    while True:
        try:
            raw = next(lines)
        except StopIteration:
            break
        except (OSError, ValueError) as e:
            raise StreamError(f"failed to read input: {e}", lineno=stats.lines + 1) from e

        stats.lines += 1
        if cancel is not None and cancel.is_set():
            raise ParseCancelled(stats.lines)

        line = raw.strip()
        if not line:
            continue

        try:
            kind = line[0]
            if kind == "c":
                builder.comment(line)
                stats.comments += 1
            elif kind == "p":
                fmt, n_vars, n_clauses = parse_problem_line(line, stats.lines)
                builder.problem(fmt, n_vars, n_clauses)
                stats.problems += 1
            elif kind == "%":
                if stats.problems == 0:
                    raise StructuralError("end-of-instance marker before problem line", line, stats.lines)
                logger.debug("End-of-instance marker at line %d, ignoring the rest", stats.lines)
                stats.end_marker = True
                break
            else:
                parse_clause_line(line, clause_buf, stats.lines)
                with memoryview(clause_buf) as mv, mv.toreadonly() as view:
                    builder.clause(view)
                stats.clauses += 1
                stats.literals += len(clause_buf)
        except HaltParsing:
            logger.debug("Builder halted the scan at line %d", stats.lines)
            stats.halted = True
            break

    logger.debug(
        "Scanned %d lines: %d comments, %d clauses, %d literals",
        stats.lines, stats.comments, stats.clauses, stats.literals,
    )
    return stats


def read_cnf(
    stream: Iterable[str],
    accepted_formats: AbstractSet[str] = frozenset({"cnf"}),
    keep_comments: bool = False,
    check_bounds: bool = False,
    cancel: Optional[CancelToken] = None,
) -> CNFFormula:
    """
    Read a DIMACS CNF file from stream and return the validated formula.

    Raises:
        DimacsError: On any malformed input; no partial formula is returned.
    """
    builder = FormulaBuilder(
        accepted_formats=accepted_formats,
        keep_comments=keep_comments,
        check_bounds=check_bounds,
    )
    read_builder(stream, builder, cancel=cancel)
    return builder.finish()


def parse_cnf(text: str, **kwargs) -> CNFFormula:
    """Parse DIMACS CNF from a string. Keyword arguments go to read_cnf."""
    return read_cnf(io.StringIO(text), **kwargs)


def load_cnf(path: Union[str, Path], config=None) -> CNFFormula:
    """
    Load a DIMACS CNF file from disk.

    Args:
        path: Path to a plain-text .cnf file.
        config: Optional ReaderConfig (or OmegaConf node with the same keys).
    """
    if config is None:
        config = ReaderConfig()

    with open(path, "r", encoding=config.encoding) as f:
        return read_cnf(
            f,
            accepted_formats=frozenset(config.accepted_formats),
            keep_comments=config.keep_comments,
            check_bounds=config.check_bounds,
        )


def read_comments(stream: Iterable[str]) -> List[str]:
    """Return the comment lines that precede the problem line."""
    collector = CommentCollector(stop_at_problem=True)
    read_builder(stream, collector)
    return collector.comments
