"""Array-level Benjamini-Hochberg step.

This module computes ranks, per-rank critical values and the raw (not yet
monotone) step-up adjusted p-values. The record-level engine in
:mod:`.benjamini_hochberg` builds on it.

References
----------
Benjamini, Y., and Hochberg, Y. (1995). Controlling the false discovery
rate: a practical and powerful approach to multiple testing. Journal of
the Royal Statistical Society Series B, 57, 289-300.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from false_discovery import config
from false_discovery.errors import FDRValidationError


def validate_fdr(fdr: float) -> float:
    """Return ``fdr`` as a float, rejecting values outside (0, 1)."""
    fdr = float(fdr)
    # NaN fails this check as well
    if not 0.0 < fdr < 1.0:
        raise FDRValidationError(
            f"Benjamini-Hochberg: FDR must be on the range (0, 1), got {fdr!r}"
        )
    return fdr


def benjamini_hochberg_arrays(
    p_values: np.ndarray, fdr: float = config.FDR_ALPHA
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Rank p-values and compute BH critical values and raw adjusted p-values.

    Parameters
    ----------
    p_values : np.ndarray
        Raw p-values in caller order. Values outside [0, 1] are accepted.
    fdr : float
        Target false discovery rate, strictly between 0 and 1. Defaults to
        ``config.FDR_ALPHA``.

    Returns
    -------
    order : np.ndarray (int)
        Stable ascending-p permutation of the input positions.
    critical_values : np.ndarray (float)
        ``(k / n) * fdr`` for 1-based rank ``k``, in sorted order.
    raw_adjusted : np.ndarray (float)
        ``min(1, (n / k) * p_k)`` in sorted order, before monotonicity repair.

    Raises
    ------
    FDRValidationError
        If ``fdr`` is not strictly between 0 and 1.

    Examples
    --------
    >>> import numpy as np
    >>> order, crit, adj = benjamini_hochberg_arrays(np.array([0.03, 0.01]), 0.05)
    >>> order
    array([1, 0])
    >>> adj
    array([0.02, 0.03])
    """
    fdr = validate_fdr(fdr)
    p_values_array = np.asarray(p_values, dtype=float)

    n = p_values_array.size
    if n == 0:
        return (
            np.array([], dtype=int),
            np.array([], dtype=float),
            np.array([], dtype=float),
        )

    order = np.argsort(p_values_array, kind="stable")
    ranks = np.arange(1, n + 1, dtype=float)

    critical_values = ranks / n * fdr
    raw_adjusted = np.minimum(1.0, n / ranks * p_values_array[order])

    return order, critical_values, raw_adjusted


__all__ = ["benjamini_hochberg_arrays", "validate_fdr"]
