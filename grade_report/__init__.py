"""
Exam Grade Report

Validates one student's exam parameters, computes statistics and a final
score, and writes run.log, summary.json and report.html.
"""

__version__ = "1.0.0"
