"""
Services module for the Exam Grade Report.
"""

from grade_report.services.artifact_writer import build_summary, write_report, write_summary
from grade_report.services.report_generator import generate_student_report

__all__ = [
    "build_summary",
    "generate_student_report",
    "write_report",
    "write_summary",
]
