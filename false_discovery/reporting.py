"""Tabular view of corrected records."""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from .records import TestStatistic

RESULT_COLUMNS = ["id", "p_value", "critical_value", "adjusted_p", "significant"]


def records_to_frame(records: Sequence[TestStatistic]) -> pd.DataFrame:
    """Collect record fields into a DataFrame, one row per record.

    Rows follow the current order of ``records``; after correction that is
    ascending p-value order. Records without an ``id`` attribute (bare
    capability objects) get ``None`` in that column, and ``significant`` is
    derived as ``p < critical_value`` for every row.

    Parameters
    ----------
    records
        Objects exposing ``p``, ``critical_value`` and ``adjusted_p``.

    Returns
    -------
    pd.DataFrame
        Columns ``id``, ``p_value``, ``critical_value``, ``adjusted_p``,
        ``significant``.
    """
    if not records:
        return pd.DataFrame(columns=RESULT_COLUMNS)

    frame = pd.DataFrame(
        {
            "id": [getattr(r, "id", None) for r in records],
            "p_value": [float(r.p) for r in records],
            "critical_value": [float(r.critical_value) for r in records],
            "adjusted_p": [float(r.adjusted_p) for r in records],
        }
    )
    frame["significant"] = frame["p_value"] < frame["critical_value"]
    return frame


__all__ = ["records_to_frame", "RESULT_COLUMNS"]
