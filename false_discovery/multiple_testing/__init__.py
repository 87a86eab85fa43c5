"""Multiple testing correction for collections of hypothesis tests.

Modules
-------
base
    Array-level ranks, critical values and raw adjusted p-values
monotonicity
    Repair strategies that make adjusted p-values non-decreasing
benjamini_hochberg
    In-place Benjamini-Hochberg correction of record lists
"""

from .base import benjamini_hochberg_arrays, validate_fdr
from .monotonicity import enforce_monotonicity
from .benjamini_hochberg import benjamini_hochberg

__all__ = [
    # Array-level
    "benjamini_hochberg_arrays",
    "validate_fdr",
    "enforce_monotonicity",
    # Record-level
    "benjamini_hochberg",
]
