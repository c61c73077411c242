"""
pipelines/ — Linear grading run: read, validate, compute, report.
"""

from grade_report.pipelines.pipeline_state import PipelineState
from grade_report.pipelines.runner import PipelineResult, run_pipeline

__all__ = ["PipelineResult", "PipelineState", "run_pipeline"]
