"""
scoring/validator.py

Fail-fast validation of raw exam input.

Rules run in a fixed order and the first violation raises its own
ExamValidationError subclass:

    1. STUDENT_NAME    trimmed length >= 2
    2. STUDENT_ID      exactly 5-12 ASCII digits
    3. EXAM_DATE       literal YYYY-MM-DD, and a real calendar date
    4. SCORES          non-empty after trimming
    5. SCORES          >= 2 entries, all numeric, each in [0, 100]
    6. BONUS_POINTS    finite number in [0, 20]
    7. PASS_THRESHOLD  finite number in [0, 100]

``collect_errors`` runs every rule and returns all violations; the pipeline
only uses ``validate``.
"""

import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Callable, List, Tuple

import structlog

from grade_report.config import ExamInput
from grade_report.core.exceptions import (
    BonusPointsError,
    ExamDateFormatError,
    ExamDateValueError,
    ExamValidationError,
    InvalidScoreError,
    PassThresholdError,
    ScoreOutOfRangeError,
    ScoreParseError,
    ScoresMissingError,
    StudentIdError,
    StudentNameError,
    TooFewScoresError,
)
from grade_report.models.exam import ExamParameters
from grade_report.scoring.score_parser import parse_scores, split_scores
from grade_report.scoring.utils import in_range, parse_decimal

logger = structlog.get_logger(__name__)

_STUDENT_ID_RE = re.compile(r"[0-9]{5,12}")
_EXAM_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


@dataclass(frozen=True)
class ValidatedExam:
    """Output of ExamValidator.validate()."""
    parameters: ExamParameters
    scores: Tuple[Decimal, ...]  # ScoreSet, input order preserved


class ExamValidator:
    """Check raw exam input rule by rule."""

    MIN_NAME_LENGTH: int = 2
    MIN_SCORES: int = 2
    MIN_SCORE: Decimal = Decimal("0")
    MAX_SCORE: Decimal = Decimal("100")
    MAX_BONUS_POINTS: Decimal = Decimal("20")
    MAX_PASS_THRESHOLD: Decimal = Decimal("100")

    # -- individual rules ---------------------------------------------------

    def check_student_name(self, name: str) -> str:
        if len(name.strip()) < self.MIN_NAME_LENGTH:
            raise StudentNameError()
        return name

    def check_student_id(self, student_id: str) -> str:
        if not _STUDENT_ID_RE.fullmatch(student_id):
            raise StudentIdError()
        return student_id

    def check_exam_date(self, exam_date: str) -> date:
        if not _EXAM_DATE_RE.fullmatch(exam_date):
            raise ExamDateFormatError()
        try:
            return date.fromisoformat(exam_date)
        except ValueError as e:
            raise ExamDateValueError() from e

    def check_scores(self, raw: str) -> Tuple[Decimal, ...]:
        if not raw.strip():
            raise ScoresMissingError()
        if len(split_scores(raw)) < self.MIN_SCORES:
            raise TooFewScoresError()
        try:
            scores = parse_scores(raw)
        except ScoreParseError as e:
            raise InvalidScoreError() from e
        if any(not in_range(s, self.MIN_SCORE, self.MAX_SCORE) for s in scores):
            raise ScoreOutOfRangeError()
        return tuple(scores)

    def check_bonus_points(self, text: str) -> Decimal:
        value = parse_decimal(text)
        if value is None or not in_range(value, Decimal("0"), self.MAX_BONUS_POINTS):
            raise BonusPointsError()
        return value

    def check_pass_threshold(self, text: str) -> Decimal:
        # Range is checked on the threshold value itself, not on a boolean.
        value = parse_decimal(text)
        if value is None or not in_range(value, Decimal("0"), self.MAX_PASS_THRESHOLD):
            raise PassThresholdError()
        return value

    # -- orchestration --------------------------------------------------------

    def _rules(self, exam_input: ExamInput) -> List[Tuple[str, Callable, str]]:
        return [
            ("student_name", self.check_student_name, exam_input.student_name),
            ("student_id", self.check_student_id, exam_input.student_id),
            ("exam_date", self.check_exam_date, exam_input.exam_date),
            ("scores", self.check_scores, exam_input.scores),
            ("bonus_points", self.check_bonus_points, exam_input.bonus_points),
            ("pass_threshold", self.check_pass_threshold, exam_input.pass_threshold),
        ]

    def validate(self, exam_input: ExamInput) -> ValidatedExam:
        """
        Run every rule in order, stopping at the first failure.

        Returns:
            ValidatedExam with the typed parameters and the parsed ScoreSet.

        Raises:
            ExamValidationError: the subclass for the first rule that failed.
        """
        checked = {}
        for key, check, value in self._rules(exam_input):
            checked[key] = check(value)

        parameters = ExamParameters(
            student_name=checked["student_name"],
            student_id=checked["student_id"],
            raw_scores=exam_input.scores,
            exam_date=exam_input.exam_date,
            has_bonus=exam_input.has_bonus,
            bonus_points=checked["bonus_points"],
            pass_threshold=checked["pass_threshold"],
        )
        logger.debug(
            "validation_passed",
            student_id=parameters.student_id,
            scores_count=len(checked["scores"]),
        )
        return ValidatedExam(parameters=parameters, scores=checked["scores"])

    def collect_errors(self, exam_input: ExamInput) -> List[ExamValidationError]:
        """Run every rule and return all violations (empty list when valid)."""
        errors: List[ExamValidationError] = []
        for _key, check, value in self._rules(exam_input):
            try:
                check(value)
            except ExamValidationError as e:
                errors.append(e)
        return errors


def validate_exam_input(exam_input: ExamInput) -> ValidatedExam:
    """Module-level shortcut for ``ExamValidator().validate``."""
    return ExamValidator().validate(exam_input)
