"""Record model consumed by the correction engine.

The engine only needs three things from a record: its raw p-value, and
somewhere to store the critical value and the adjusted p-value. Any object
exposing those attributes can be corrected; ``Value`` is the concrete record
produced by the input parser.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class TestStatistic(Protocol):
    """Capability required by :func:`benjamini_hochberg`.

    ``critical_value`` and ``adjusted_p`` are written by the correction
    engine. Their values before a successful correction are meaningless.
    """

    critical_value: float
    adjusted_p: float

    @property
    def p(self) -> float: ...


@dataclass
class Value:
    """One annotated hypothesis test.

    Attributes
    ----------
    id : str | None
        Optional display label. ``None`` when the input carried no identifier.
    p_value : float
        Raw p-value. Not range-checked.
    critical_value : float
        BH threshold for this record's rank. Only meaningful after correction.
    adjusted_p : float
        FDR-adjusted p-value (q-value). Only meaningful after correction.
    """

    id: str | None
    p_value: float
    critical_value: float = 0.0
    adjusted_p: float = 0.0

    @property
    def p(self) -> float:
        return self.p_value

    @property
    def significant(self) -> bool:
        """Whether the raw p-value falls strictly below its critical value."""
        return self.p_value < self.critical_value


__all__ = ["TestStatistic", "Value"]
