"""
scoring/score_parser.py

Turns the SCORES string into an ordered list of Decimals.

    " 90, 78 ,,100 "  ->  [Decimal("90"), Decimal("78"), Decimal("100")]

Whitespace around segments and empty segments are ignored. Range checks are
left to the Validator; this module only decides what is a number.
"""

from decimal import Decimal
from typing import List

from grade_report.core.exceptions import ScoreParseError
from grade_report.scoring.utils import parse_decimal

SCORE_DELIMITER = ","


def split_scores(raw: str) -> List[str]:
    """Split on commas, trim each segment and drop the empty ones."""
    segments = (s.strip() for s in raw.split(SCORE_DELIMITER))
    return [s for s in segments if s]


def parse_scores(raw: str) -> List[Decimal]:
    """
    Parse a comma-delimited score string, preserving input order.

    Raises:
        ScoreParseError: for the first segment that is not a finite number.
    """
    scores: List[Decimal] = []
    for position, segment in enumerate(split_scores(raw), start=1):
        value = parse_decimal(segment)
        if value is None:
            raise ScoreParseError(segment, position)
        scores.append(value)
    return scores
