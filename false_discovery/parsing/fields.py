"""Identifier / p-value field detection for one tokenized record.

The heuristic is deliberately simple: the first integer-looking token is the
identifier and the first float-looking token is the p-value. A non-numeric
token also claims the identifier slot if it is still free. An identifier
that looks like a float is therefore read as the p-value.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Sequence, Tuple

from false_discovery.errors import FieldDetectionError

logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def parses_as_int(token: str) -> bool:
    """Return True for a base-10 integer literal that fits in 64 bits."""
    if _INTEGER_PATTERN.fullmatch(token) is None:
        return False
    return _INT64_MIN <= int(token) <= _INT64_MAX


def parses_as_float(token: str) -> bool:
    """Return True if ``token`` is a float literal with no padding or separators."""
    if not token or token != token.strip() or "_" in token:
        return False
    try:
        float(token)
    except ValueError:
        return False
    return True


def detect_fields(fields: Sequence[str]) -> Tuple[Optional[int], int]:
    """Locate the identifier and p-value columns of a record.

    Parameters
    ----------
    fields : Sequence[str]
        Tokens of one record, left to right.

    Returns
    -------
    id_index : int | None
        Column of the identifier, or None when the record has none.
    p_index : int
        Column of the p-value.

    Raises
    ------
    FieldDetectionError
        If no token can be read as a float.

    Examples
    --------
    >>> detect_fields(["3", "0.005"])
    (0, 1)
    >>> detect_fields(["0.025"])
    (None, 0)
    """
    id_index: Optional[int] = None
    p_index: Optional[int] = None

    for k, token in enumerate(fields):
        if id_index is None and parses_as_int(token):
            id_index = k
            continue
        if p_index is None and parses_as_float(token):
            p_index = k
            continue
        if id_index is None:
            id_index = k

    if p_index is None:
        raise FieldDetectionError("Could not detect P-value field")

    logger.debug("Detected fields: id=%s, p=%d.", id_index, p_index)
    return id_index, p_index


__all__ = ["detect_fields", "parses_as_float", "parses_as_int"]
