"""
models/ — Pydantic models and enumerations for a grading run.
"""

from grade_report.models.enumerations import GradeStatus, PipelineStage
from grade_report.models.exam import ExamParameters, ExamSummary

__all__ = ["ExamParameters", "ExamSummary", "GradeStatus", "PipelineStage"]
