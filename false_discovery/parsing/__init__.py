"""Heuristic parsing of delimiter-ambiguous p-value listings.

Modules
-------
tokenizer
    Quote-aware row tokenization for a given delimiter
fields
    Identifier / p-value column detection
delimiter
    Delimiter guessing over a fixed candidate set
parser
    End-to-end text to ``Value`` conversion
"""

from .delimiter import guess_delimiter
from .fields import detect_fields
from .parser import parse_delimited_input

__all__ = [
    "guess_delimiter",
    "detect_fields",
    "parse_delimited_input",
]
