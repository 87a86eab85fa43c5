"""Guess the field delimiter of unlabeled, line-oriented input."""

from __future__ import annotations

import logging
from typing import Sequence

from false_discovery import config
from false_discovery.errors import DelimiterDetectionError, ParseError
from .tokenizer import iter_rows

logger = logging.getLogger(__name__)


def _candidate_fits(text: str, delimiter: str, sample_size: int) -> bool:
    """Check that ``delimiter`` splits the first rows into equal-width records.

    A failure on row ``i`` (bad quoting, width change, or running out of rows)
    still accepts the candidate when ``i`` earlier rows already agreed.
    """
    rows = iter_rows(text, delimiter)
    n_fields = -1

    for i in range(sample_size):
        try:
            _, fields = next(rows)
        except (StopIteration, ParseError):
            return i >= config.MIN_AGREEING_LINES

        if i == 0:
            n_fields = len(fields)
            # Needs room for an identifier and a p-value
            if n_fields < config.MIN_DELIMITED_FIELDS:
                return False
            continue

        if len(fields) != n_fields:
            return i >= config.MIN_AGREEING_LINES

    return True


def guess_delimiter(lines: Sequence[str]) -> str:
    """Identify the most likely field delimiter of ``lines``.

    Candidates are tried in the fixed order of
    :data:`false_discovery.config.DELIMITER_CANDIDATES` (space, comma, tab,
    pipe); the first one that fits the sample wins, so identical input always
    yields the same answer.

    Parameters
    ----------
    lines : Sequence[str]
        Input split into lines, without line terminators.

    Returns
    -------
    str
        The single-character delimiter.

    Raises
    ------
    DelimiterDetectionError
        If no candidate fits.

    Notes
    -----
    Only the first ``DELIMITER_SAMPLE_LINES`` non-empty lines are inspected.
    Quoted fields may contain the delimiter.

    Examples
    --------
    >>> guess_delimiter(["3\\t0.005", "4\\t0.34", "Six\\t0.11"])
    '\\t'
    """
    sample_size = min(config.DELIMITER_SAMPLE_LINES, sum(1 for line in lines if line))
    text = "\n".join(lines)

    if sample_size > 0:
        for delimiter in config.DELIMITER_CANDIDATES:
            if _candidate_fits(text, delimiter, sample_size):
                logger.debug("Guessed delimiter %r.", delimiter)
                return delimiter
            logger.debug("Rejected delimiter candidate %r.", delimiter)

    raise DelimiterDetectionError("No valid delimiter could be identified")


__all__ = ["guess_delimiter"]
