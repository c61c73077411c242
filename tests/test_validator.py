# tests/test_validator.py

"""
Validator Tests - fail-fast rule order, one error class per rule
"""

import pytest
from datetime import date
from decimal import Decimal

from grade_report.core.exceptions import (
    BonusPointsError,
    ExamDateFormatError,
    ExamDateValueError,
    ExamValidationError,
    InvalidScoreError,
    PassThresholdError,
    ScoreOutOfRangeError,
    ScoresMissingError,
    StudentIdError,
    StudentNameError,
    TooFewScoresError,
)
from grade_report.scoring.validator import ExamValidator, validate_exam_input


@pytest.fixture
def validator():
    return ExamValidator()


# STUDENT NAME


class TestStudentName:

    @pytest.mark.parametrize("name", ["", " ", "J", "  J  "])
    def test_short_names_rejected(self, make_input, name):
        with pytest.raises(StudentNameError, match="STUDENT_NAME must be at least 2 characters"):
            validate_exam_input(make_input(student_name=name))

    @pytest.mark.parametrize("name", ["Jo", "Jane Doe", " Al "])
    def test_two_or_more_characters_accepted(self, validator, name):
        assert validator.check_student_name(name) == name


# STUDENT ID


class TestStudentId:

    @pytest.mark.parametrize("student_id", ["12345", "123456789", "123456789012"])
    def test_five_to_twelve_digits_accepted(self, validator, student_id):
        assert validator.check_student_id(student_id) == student_id

    @pytest.mark.parametrize(
        "student_id",
        [
            "1234",            # 4 digits
            "1234567890123",   # 13 digits
            "12a45",
            "12 345",
            "-12345",
            "12345\n",
            "١٢٣٤٥",           # non-ASCII digits
            "",
        ],
    )
    def test_invalid_ids_rejected(self, validator, student_id):
        with pytest.raises(StudentIdError, match="STUDENT_ID must be 5-12 digits"):
            validator.check_student_id(student_id)


# EXAM DATE


class TestExamDate:

    def test_valid_date(self, validator):
        assert validator.check_exam_date("2024-03-15") == date(2024, 3, 15)

    def test_leap_day_accepted(self, validator):
        assert validator.check_exam_date("2024-02-29") == date(2024, 2, 29)

    @pytest.mark.parametrize("value", ["2024-3-15", "15-03-2024", "2024/03/15", "20240315", "", "2024-03-15T00:00"])
    def test_wrong_shape_rejected(self, validator, value):
        with pytest.raises(ExamDateFormatError, match="YYYY-MM-DD"):
            validator.check_exam_date(value)

    @pytest.mark.parametrize("value", ["2024-13-01", "2024-02-30", "2023-02-29", "2024-00-10", "0000-01-01"])
    def test_impossible_dates_rejected(self, validator, value):
        with pytest.raises(ExamDateValueError, match="EXAM_DATE is not a valid date"):
            validator.check_exam_date(value)


# SCORES


class TestScores:

    def test_missing_scores(self, validator):
        with pytest.raises(ScoresMissingError, match="SCORES is required"):
            validator.check_scores("   ")

    @pytest.mark.parametrize("raw", ["90", "90,", " , 90 ,"])
    def test_single_score_rejected(self, validator, raw):
        with pytest.raises(TooFewScoresError, match="at least 2 numbers"):
            validator.check_scores(raw)

    def test_count_checked_before_numeric(self, validator):
        with pytest.raises(TooFewScoresError):
            validator.check_scores("abc")

    def test_non_numeric_rejected(self, validator):
        with pytest.raises(InvalidScoreError, match="invalid number"):
            validator.check_scores("90,abc")

    @pytest.mark.parametrize("raw", ["9_0,80", "\u0669\u0660,80", "\uff19\uff10,80"])
    def test_non_ascii_or_separated_digits_rejected(self, validator, raw):
        with pytest.raises(InvalidScoreError, match="invalid number"):
            validator.check_scores(raw)

    @pytest.mark.parametrize("raw", ["90,150", "-1,50", "100.01,0"])
    def test_out_of_range_rejected(self, validator, raw):
        with pytest.raises(ScoreOutOfRangeError, match="between 0 and 100"):
            validator.check_scores(raw)

    def test_bounds_inclusive(self, validator):
        assert validator.check_scores("0,100") == (Decimal("0"), Decimal("100"))


# BONUS POINTS / PASS THRESHOLD


class TestBonusPoints:

    @pytest.mark.parametrize("value", ["0", "20", "7.5"])
    def test_accepted(self, validator, value):
        assert validator.check_bonus_points(value) == Decimal(value)

    @pytest.mark.parametrize("value", ["-1", "20.5", "abc", "NaN", "Infinity", "1_0", "\u0665", "\uff15"])
    def test_rejected(self, validator, value):
        with pytest.raises(BonusPointsError, match="between 0 and 20"):
            validator.check_bonus_points(value)

    def test_checked_even_without_bonus_flag(self, make_input):
        with pytest.raises(BonusPointsError):
            validate_exam_input(make_input(has_bonus=False, bonus_points="50"))


class TestPassThreshold:
    """
    The threshold's own value is range-checked. Out-of-range thresholds such
    as 150 or -5 are rejected here even though a check that only looked for
    NaN would have let them through.
    """

    @pytest.mark.parametrize("value", ["0", "60", "100", "59.5"])
    def test_accepted(self, validator, value):
        assert validator.check_pass_threshold(value) == Decimal(value)

    @pytest.mark.parametrize("value", ["150", "-5", "100.1", "abc", "nan", "6_0", "\u0666\u0660", "\uff16\uff10"])
    def test_rejected(self, validator, value):
        with pytest.raises(PassThresholdError, match="between 0 and 100"):
            validator.check_pass_threshold(value)


# FULL VALIDATION


class TestValidate:

    def test_scenario_a_is_valid(self, make_input):
        validated = validate_exam_input(make_input())
        assert validated.scores == (Decimal("90"), Decimal("78"), Decimal("100"))
        assert validated.parameters.student_name == "Jane Doe"
        assert validated.parameters.bonus_points == Decimal("0")
        assert validated.parameters.pass_threshold == Decimal("60")
        assert validated.parameters.raw_scores == "90,78,100"

    def test_first_failure_wins(self, make_input):
        bad = make_input(student_name="J", student_id="12", exam_date="nope", scores="")
        with pytest.raises(StudentNameError):
            validate_exam_input(bad)

    def test_rule_order(self, make_input):
        with pytest.raises(StudentIdError):
            validate_exam_input(make_input(student_id="12", exam_date="nope"))
        with pytest.raises(ExamDateFormatError):
            validate_exam_input(make_input(exam_date="nope", scores=""))
        with pytest.raises(ScoresMissingError):
            validate_exam_input(make_input(scores="", bonus_points="99"))
        with pytest.raises(BonusPointsError):
            validate_exam_input(make_input(bonus_points="99", pass_threshold="999"))

    def test_errors_share_a_base_class_and_name_their_field(self, make_input):
        with pytest.raises(ExamValidationError) as exc:
            validate_exam_input(make_input(scores="90,150"))
        assert exc.value.field == "SCORES"
        assert exc.value.message == "Each score must be between 0 and 100."

    def test_bonus_flag_carried_through(self, make_input):
        validated = validate_exam_input(make_input(has_bonus="TRUE", bonus_points="20"))
        assert validated.parameters.has_bonus is True
        assert validated.parameters.bonus_points == Decimal("20")


class TestCollectErrors:

    def test_valid_input_has_no_errors(self, validator, make_input):
        assert validator.collect_errors(make_input()) == []

    def test_reports_every_failed_rule(self, validator, make_input):
        bad = make_input(
            student_name="J", student_id="12", exam_date="2024-02-30",
            scores="90", bonus_points="30", pass_threshold="101",
        )
        errors = validator.collect_errors(bad)
        assert [type(e) for e in errors] == [
            StudentNameError,
            StudentIdError,
            ExamDateValueError,
            TooFewScoresError,
            BonusPointsError,
            PassThresholdError,
        ]
