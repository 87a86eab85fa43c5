"""Monotonicity repair for step-up adjusted p-values.

Raw BH estimates ``(n / k) * p_k`` can decrease with rank. Adjusted p-values
read in ascending-p order must never decrease, so each estimate is replaced
by the minimum over its own rank and every higher rank.

Two strategies produce the same result:

running_min
    One right-to-left running-minimum sweep. Always finishes in one pass.
iterative
    Repeated forward scans that pull a smaller value back onto its
    predecessor until a scan changes nothing. Each scan moves a minimum one
    position left, so long decreasing runs need many scans; the scan budget
    is capped and exhausting it raises :class:`ConvergenceError`.
"""

from __future__ import annotations

import logging

import numpy as np

from false_discovery import config
from false_discovery.errors import ConvergenceError

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = ("running_min", "iterative")


def running_min_repair(adjusted: np.ndarray) -> np.ndarray:
    """Return the right-to-left running minimum of ``adjusted``."""
    adjusted = np.asarray(adjusted, dtype=float)
    if adjusted.size == 0:
        return adjusted.copy()
    # NaN p-values sort last; fmin skips them so they never reach earlier ranks
    return np.fmin.accumulate(adjusted[::-1])[::-1]


def iterative_repair(
    adjusted: np.ndarray, max_passes: int = config.MAX_MONOTONICITY_PASSES
) -> np.ndarray:
    """Repair by repeated forward scans, patching each predecessor in turn.

    Parameters
    ----------
    adjusted : np.ndarray
        Raw adjusted p-values in ascending-p order.
    max_passes : int
        Maximum number of forward scans.

    Returns
    -------
    np.ndarray
        Repaired copy of ``adjusted``.

    Raises
    ------
    ConvergenceError
        If every one of ``max_passes`` scans still had to patch a value.
        The partially repaired array is available as ``error.partial``.
    """
    repaired = np.array(adjusted, dtype=float, copy=True)

    for n_pass in range(1, max_passes + 1):
        fixed = False
        for k in range(1, repaired.size):
            if repaired[k] < repaired[k - 1]:
                repaired[k - 1] = repaired[k]
                fixed = True
        if not fixed:
            logger.debug("Iterative repair settled after %d pass(es).", n_pass)
            return repaired

    logger.warning(
        "Iterative monotonicity repair did not settle after %d passes (n=%d).",
        max_passes,
        repaired.size,
    )
    raise ConvergenceError(
        f"nonmonotonic P values. Could not resolve after {max_passes} iterations",
        passes=max_passes,
        partial=repaired,
    )


def enforce_monotonicity(
    adjusted: np.ndarray,
    method: str = config.MONOTONICITY_METHOD,
    max_passes: int = config.MAX_MONOTONICITY_PASSES,
) -> np.ndarray:
    """Make adjusted p-values non-decreasing in ascending-p order.

    Parameters
    ----------
    adjusted : np.ndarray
        Raw adjusted p-values in ascending-p order.
    method : str
        Repair strategy:
        - "running_min" (default): single right-to-left sweep
        - "iterative": repeated forward scans bounded by ``max_passes``
    max_passes : int
        Scan budget for ``method="iterative"``; ignored otherwise.

    Returns
    -------
    np.ndarray
        Repaired adjusted p-values, same length and order as the input.

    Raises
    ------
    ValueError
        If ``method`` is not one of the supported values
    ConvergenceError
        If ``method="iterative"`` exhausts its scan budget

    Examples
    --------
    >>> import numpy as np
    >>> enforce_monotonicity(np.array([0.03, 0.02, 0.5]))
    array([0.02, 0.02, 0.5 ])
    """
    if method == "running_min":
        return running_min_repair(adjusted)
    elif method == "iterative":
        return iterative_repair(adjusted, max_passes=max_passes)
    else:
        raise ValueError(
            f"Unknown monotonicity method: {method!r}. "
            f"Supported methods: 'running_min', 'iterative'"
        )


__all__ = [
    "SUPPORTED_METHODS",
    "enforce_monotonicity",
    "iterative_repair",
    "running_min_repair",
]
