"""Quote-aware tokenization of delimited text.

Rows are produced by :mod:`csv` with a double-quote quote character and
doubled-quote escaping: inside a quoted field a pair of double quotes reads
as one literal double quote. A double quote inside an unquoted field is kept
as an ordinary character. Empty lines are skipped and do not produce rows.
"""

from __future__ import annotations

import csv
import io
from typing import Iterator, List, Tuple

from false_discovery import config
from false_discovery.errors import ParseError

Row = Tuple[int, List[str]]


def _reader(text: str, delimiter: str):
    return csv.reader(
        io.StringIO(text, newline=""),
        delimiter=delimiter,
        quotechar=config.QUOTE_CHAR,
        doublequote=True,
        strict=True,
    )


def iter_rows(text: str, delimiter: str) -> Iterator[Row]:
    """Yield ``(line_number, fields)`` for each non-empty row of ``text``.

    ``line_number`` is the 1-based line on which the row ends.

    Raises
    ------
    ParseError
        If the text is not well-formed for ``delimiter`` (for example an
        unterminated quoted field).
    """
    reader = _reader(text, delimiter)
    while True:
        try:
            fields = next(reader)
        except StopIteration:
            return
        except csv.Error as exc:
            raise ParseError(
                f"parse error on line {reader.line_num}: {exc}",
                line_number=reader.line_num,
            ) from exc
        if not fields:
            continue
        yield reader.line_num, fields


def iter_records(text: str, delimiter: str) -> Iterator[Row]:
    """Like :func:`iter_rows`, but every row must match the first in width.

    Raises
    ------
    ParseError
        On malformed quoting or when a row's field count differs from the
        first row's.
    """
    n_fields = -1
    for line_number, fields in iter_rows(text, delimiter):
        if n_fields < 0:
            n_fields = len(fields)
        elif len(fields) != n_fields:
            raise ParseError(
                f"record on line {line_number}: wrong number of fields "
                f"(expected {n_fields}, got {len(fields)})",
                line_number=line_number,
            )
        yield line_number, fields


__all__ = ["Row", "iter_rows", "iter_records"]
