"""Benjamini-Hochberg correction applied in place to a list of records.

A "discovery" is a significant result; false discoveries are results where
the null hypothesis is incorrectly rejected. The Benjamini-Hochberg
procedure bounds the expected proportion of false discoveries by the
requested FDR.

After correction every record carries the critical value for its rank and
its FDR-adjusted p-value. A record whose raw p-value is below its critical
value is significant under the procedure.
"""

from __future__ import annotations

import logging
from typing import MutableSequence

import numpy as np

from false_discovery import config
from false_discovery.errors import ConvergenceError
from false_discovery.records import TestStatistic
from .base import benjamini_hochberg_arrays, validate_fdr
from .monotonicity import SUPPORTED_METHODS, enforce_monotonicity

logger = logging.getLogger(__name__)


def _write_adjusted(
    records: MutableSequence[TestStatistic], adjusted: np.ndarray
) -> None:
    for record, value in zip(records, adjusted):
        record.adjusted_p = float(value)


def benjamini_hochberg(
    fdr: float,
    records: MutableSequence[TestStatistic],
    method: str = config.MONOTONICITY_METHOD,
    max_passes: int = config.MAX_MONOTONICITY_PASSES,
) -> None:
    """Apply Benjamini-Hochberg FDR correction to ``records`` in place.

    ``records`` is reordered by ascending p-value (stable for ties) and each
    record's ``critical_value`` and ``adjusted_p`` are overwritten. Callers
    that need the original order must capture it before calling.

    Parameters
    ----------
    fdr : float
        Target false discovery rate, strictly between 0 and 1.
    records : MutableSequence[TestStatistic]
        Objects exposing ``p`` and writable ``critical_value`` and
        ``adjusted_p`` attributes. P-values are not range-checked.
    method : str, default="running_min"
        Monotonicity repair strategy, see
        :func:`~false_discovery.multiple_testing.monotonicity.enforce_monotonicity`.
    max_passes : int, default=200
        Scan budget for ``method="iterative"``.

    Raises
    ------
    FDRValidationError
        If ``fdr`` is outside (0, 1). Nothing is mutated.
    ValueError
        If ``method`` is unknown. Nothing is mutated.
    ConvergenceError
        If the iterative repair exhausts its budget. ``records`` is left
        sorted with critical values set and adjusted p-values partially
        repaired.

    Examples
    --------
    >>> from false_discovery import Value
    >>> values = [Value("B", 0.03), Value("A", 0.01)]
    >>> benjamini_hochberg(0.05, values)
    >>> [(v.id, v.adjusted_p) for v in values]
    [('A', 0.02), ('B', 0.03)]
    """
    fdr = validate_fdr(fdr)
    if method not in SUPPORTED_METHODS:
        raise ValueError(
            f"Unknown monotonicity method: {method!r}. "
            f"Supported methods: {', '.join(map(repr, SUPPORTED_METHODS))}"
        )

    n_tests = len(records)
    if n_tests == 0:
        return

    p_values = np.array([record.p for record in records], dtype=float)
    order, critical_values, raw_adjusted = benjamini_hochberg_arrays(p_values, fdr)

    # Reorder through the index permutation so the caller keeps the same
    # record objects.
    records[:] = [records[i] for i in order]

    for record, critical_value in zip(records, critical_values):
        record.critical_value = float(critical_value)

    try:
        adjusted = enforce_monotonicity(
            raw_adjusted, method=method, max_passes=max_passes
        )
    except ConvergenceError as exc:
        if exc.partial is not None:
            _write_adjusted(records, exc.partial)
        raise

    _write_adjusted(records, adjusted)
    logger.debug(
        "Corrected %d p-values at FDR=%g (%s repair).", n_tests, fdr, method
    )


__all__ = ["benjamini_hochberg"]
