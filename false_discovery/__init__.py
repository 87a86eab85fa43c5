"""Benjamini-Hochberg false discovery rate correction for p-value listings.

Typical use::

    from false_discovery import benjamini_hochberg, parse_delimited_input

    values = parse_delimited_input(text)
    benjamini_hochberg(0.05, values)
    significant = [v for v in values if v.significant]
"""

import logging

from . import config
from .errors import (
    ConvergenceError,
    DelimiterDetectionError,
    FalseDiscoveryError,
    FDRValidationError,
    FieldDetectionError,
    ParseError,
    ValidationError,
)
from .records import TestStatistic, Value
from .multiple_testing import (
    benjamini_hochberg,
    benjamini_hochberg_arrays,
    enforce_monotonicity,
)
from .parsing import detect_fields, guess_delimiter, parse_delimited_input
from .reporting import records_to_frame

# Library-friendly: leave handlers and levels to callers
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "config",
    # Records
    "TestStatistic",
    "Value",
    # Correction
    "benjamini_hochberg",
    "benjamini_hochberg_arrays",
    "enforce_monotonicity",
    # Parsing
    "detect_fields",
    "guess_delimiter",
    "parse_delimited_input",
    # Reporting
    "records_to_frame",
    # Errors
    "FalseDiscoveryError",
    "ValidationError",
    "FDRValidationError",
    "ParseError",
    "DelimiterDetectionError",
    "FieldDetectionError",
    "ConvergenceError",
]
