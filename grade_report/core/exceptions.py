"""
Custom Exceptions - Exam Grade Report
grade_report/core/exceptions.py

Exception classes for input validation and score parsing.
"""


class GradeReportException(Exception):
    """Base exception for grading runs."""

    pass


class ScoreParseError(GradeReportException, ValueError):
    """A score segment could not be read as a finite number."""

    def __init__(self, segment: str, position: int):
        self.segment = segment
        self.position = position
        super().__init__(f"Score #{position} is not a number: {segment!r}")


class ExamValidationError(GradeReportException, ValueError):
    """An exam parameter failed a validation rule."""

    field: str = ""
    default_message: str = "Invalid exam parameters."

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class StudentNameError(ExamValidationError):
    """Student name shorter than two characters."""

    field = "STUDENT_NAME"
    default_message = "STUDENT_NAME must be at least 2 characters."


class StudentIdError(ExamValidationError):
    """Student ID is not 5-12 ASCII digits."""

    field = "STUDENT_ID"
    default_message = "STUDENT_ID must be 5-12 digits."


class ExamDateFormatError(ExamValidationError):
    """Exam date does not look like YYYY-MM-DD."""

    field = "EXAM_DATE"
    default_message = "EXAM_DATE must be in YYYY-MM-DD format."


class ExamDateValueError(ExamValidationError):
    """Exam date has the right shape but is not a calendar date."""

    field = "EXAM_DATE"
    default_message = "EXAM_DATE is not a valid date."


class ScoresMissingError(ExamValidationError):
    """No scores given."""

    field = "SCORES"
    default_message = "SCORES is required (e.g., 90,78,100)."


class TooFewScoresError(ExamValidationError):
    """Fewer than two scores given."""

    field = "SCORES"
    default_message = "SCORES must contain at least 2 numbers."


class InvalidScoreError(ExamValidationError):
    """A score is not a finite number."""

    field = "SCORES"
    default_message = "SCORES contains invalid number."


class ScoreOutOfRangeError(ExamValidationError):
    """A score lies outside [0, 100]."""

    field = "SCORES"
    default_message = "Each score must be between 0 and 100."


class BonusPointsError(ExamValidationError):
    """Bonus points are not a number in [0, 20]."""

    field = "BONUS_POINTS"
    default_message = "BONUS_POINTS must be a number between 0 and 20."


class PassThresholdError(ExamValidationError):
    """Pass threshold is not a number in [0, 100]."""

    field = "PASS_THRESHOLD"
    default_message = "PASS_THRESHOLD must be a number between 0 and 100."
