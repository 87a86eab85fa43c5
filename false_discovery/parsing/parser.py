"""Turn loosely formatted text into :class:`~false_discovery.records.Value` records."""

from __future__ import annotations

import logging
from typing import List, Optional

from false_discovery import config
from false_discovery.errors import (
    DelimiterDetectionError,
    FieldDetectionError,
    ParseError,
)
from false_discovery.records import Value
from .delimiter import guess_delimiter
from .fields import detect_fields, parses_as_float
from .tokenizer import iter_records

logger = logging.getLogger(__name__)


def parse_delimited_input(text: str) -> List[Value]:
    """Parse one-record-per-line text into uncorrected values.

    The delimiter is guessed from the first lines and the identifier and
    p-value columns are detected on the first record, then applied to every
    record. Input whose first line is a bare number and that has no usable
    delimiter is read as one p-value per line without identifiers.

    Parameters
    ----------
    text : str
        Raw input. ``\\r\\n`` line endings are accepted.

    Returns
    -------
    List[Value]
        One value per non-empty line, in input order, not yet corrected.

    Raises
    ------
    DelimiterDetectionError
        If no delimiter fits and the first line is not a bare number.
    FieldDetectionError
        If the first record has no float-like token.
    ParseError
        If a record is malformed, has the wrong width, or its p-value token
        is not a number. No partial result is returned.

    Examples
    --------
    >>> [(v.id, v.p_value) for v in parse_delimited_input("A,0.01\\nB,0.2")]
    [('A', 0.01), ('B', 0.2)]
    """
    lines = text.replace("\r\n", "\n").split("\n")

    try:
        delimiter = guess_delimiter(lines)
    except DelimiterDetectionError as exc:
        if not parses_as_float(lines[0]):
            raise DelimiterDetectionError(
                f"{exc} => line 1 is not a bare p-value: {lines[0]!r}",
                line_number=1,
            ) from exc
        # One column needs no delimiter
        logger.info("No delimiter found; reading input as one p-value per line.")
        delimiter = config.SINGLE_COLUMN_DELIMITER

    values: List[Value] = []
    id_index: Optional[int] = None
    p_index: Optional[int] = None

    for line_number, fields in iter_records("\n".join(lines), delimiter):
        # The format is assumed homogeneous: detect once, reuse for every row.
        if p_index is None:
            try:
                id_index, p_index = detect_fields(fields)
            except FieldDetectionError as exc:
                raise FieldDetectionError(
                    f"Error in line {line_number} of the input: {exc}",
                    line_number=line_number,
                ) from exc

        token = fields[p_index]
        if not parses_as_float(token):
            raise ParseError(
                f"Error in line {line_number} of the input: "
                f"P-value {token!r} is not a number",
                line_number=line_number,
            )

        values.append(
            Value(
                id=fields[id_index] if id_index is not None else None,
                p_value=float(token),
            )
        )

    logger.debug("Parsed %d values (delimiter=%r).", len(values), delimiter)
    return values


__all__ = ["parse_delimited_input"]
