"""Exception types raised by the correction engine and the input parser.

Validation errors derive from ``ValueError`` and are raised before any
record is touched. Convergence errors derive from ``RuntimeError`` and may
leave a partially repaired collection behind.
"""

from __future__ import annotations

import numpy as np


class FalseDiscoveryError(Exception):
    """Base class for all errors raised by this package."""


class ValidationError(FalseDiscoveryError, ValueError):
    """Input was rejected before any work was done."""


class FDRValidationError(ValidationError):
    """Requested false discovery rate lies outside the open interval (0, 1)."""


class ParseError(ValidationError):
    """Delimited input could not be turned into records.

    Attributes
    ----------
    line_number : int | None
        1-based input line at which parsing stopped, when known.
    """

    def __init__(self, message: str, line_number: int | None = None) -> None:
        super().__init__(message)
        self.line_number = line_number


class DelimiterDetectionError(ParseError):
    """No candidate delimiter splits the input into consistent records."""


class FieldDetectionError(ParseError):
    """No token of a record could be read as a p-value."""


class ConvergenceError(FalseDiscoveryError, RuntimeError):
    """Iterative monotonicity repair did not settle within its pass budget.

    Attributes
    ----------
    passes : int
        Number of forward scans performed.
    partial : np.ndarray | None
        Adjusted p-values as they stood when the repair gave up.
    """

    def __init__(
        self, message: str, passes: int, partial: np.ndarray | None = None
    ) -> None:
        super().__init__(message)
        self.passes = passes
        self.partial = partial


__all__ = [
    "FalseDiscoveryError",
    "ValidationError",
    "FDRValidationError",
    "ParseError",
    "DelimiterDetectionError",
    "FieldDetectionError",
    "ConvergenceError",
]
