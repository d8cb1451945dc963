"""
Custom exceptions for the DIMACS reader.
"""

from typing import Optional


class DimacsError(Exception):
    """Base class for every error raised while reading a DIMACS file."""

    def __init__(self, message: str, line: Optional[str] = None, lineno: int = -1):
        self.message = message
        self.line = line
        self.lineno = lineno
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = self.message
        if self.lineno >= 0:
            msg = f"line {self.lineno}: {msg}"
        if self.line is not None:
            msg += f": {self.line!r}"
        return msg


class StreamError(DimacsError):
    """Raised when the underlying stream cannot be read to completion."""


class StructuralError(DimacsError):
    """Raised when a line does not have the shape its kind requires."""


class OrderingError(DimacsError):
    """Raised when a clause precedes the problem line or the problem line repeats."""


class CardinalityError(DimacsError):
    """Raised when the number of clauses differs from the declared count."""

    def __init__(self, message: str, expected: int, actual: int,
                 line: Optional[str] = None, lineno: int = -1):
        self.expected = expected
        self.actual = actual
        super().__init__(message, line, lineno)


class LiteralError(DimacsError):
    """Raised when a clause line holds a malformed or misplaced literal."""


class ParseCancelled(DimacsError):
    """Raised when a scan is cancelled between two lines."""

    def __init__(self, lineno: int = -1):
        super().__init__("parse cancelled", lineno=lineno)


class HaltParsing(Exception):
    """
    Raised by a builder to stop a scan early without failing it.

    The reader catches it and returns normally, so callers never see it.
    """
