"""
Core Package - Exam Grade Report
grade_report/core/__init__.py

Core infrastructure: exceptions, logging.
"""

from grade_report.core.exceptions import (
    BonusPointsError,
    ExamDateFormatError,
    ExamDateValueError,
    ExamValidationError,
    GradeReportException,
    InvalidScoreError,
    PassThresholdError,
    ScoreOutOfRangeError,
    ScoreParseError,
    ScoresMissingError,
    StudentIdError,
    StudentNameError,
    TooFewScoresError,
)
from grade_report.core.logging_utils import configure_logging, open_run_log

__all__ = [
    # Logging
    "configure_logging",
    "open_run_log",
    # Exceptions
    "BonusPointsError",
    "ExamDateFormatError",
    "ExamDateValueError",
    "ExamValidationError",
    "GradeReportException",
    "InvalidScoreError",
    "PassThresholdError",
    "ScoreOutOfRangeError",
    "ScoreParseError",
    "ScoresMissingError",
    "StudentIdError",
    "StudentNameError",
    "TooFewScoresError",
]
