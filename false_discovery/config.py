"""
Central configuration for the false-discovery correction library.
"""

# --- Correction Parameters ---

# Default false discovery rate used when callers do not supply one.
FDR_ALPHA: float = 0.05

# Monotonicity repair strategy used by the correction engine.
# Options: 'running_min' (single right-to-left sweep), 'iterative'
MONOTONICITY_METHOD: str = "running_min"

# Upper bound on forward scans made by the 'iterative' repair strategy
# before it gives up with a ConvergenceError.
MAX_MONOTONICITY_PASSES: int = 200

# --- Delimiter Detection Parameters ---

# Candidate field delimiters, in priority order. The first candidate that
# tokenizes the sample consistently wins.
DELIMITER_CANDIDATES: tuple[str, ...] = (" ", ",", "\t", "|")

# Number of leading lines inspected when guessing the delimiter.
DELIMITER_SAMPLE_LINES: int = 5

# A delimited record needs at least an identifier and a p-value.
MIN_DELIMITED_FIELDS: int = 2

# Once this many rows agree on a field count, a later divergence is treated
# as a short trailing record rather than a wrong delimiter.
MIN_AGREEING_LINES: int = 2

# --- Tokenizer Parameters ---

QUOTE_CHAR: str = '"'

# Delimiter handed to the tokenizer for bare one-p-value-per-line input.
SINGLE_COLUMN_DELIMITER: str = ","
