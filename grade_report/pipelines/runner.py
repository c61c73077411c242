from __future__ import annotations

import json
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Optional, Tuple

import structlog

from grade_report.config import ExamInput, Settings, get_settings, read_exam_input
from grade_report.core.exceptions import ExamValidationError
from grade_report.core.logging_utils import open_run_log
from grade_report.models.enumerations import PipelineStage
from grade_report.models.exam import ExamParameters, ExamSummary
from grade_report.pipelines.pipeline_state import PipelineState
from grade_report.scoring.scoring_policy import ScoreOutcome, ScoringPolicy
from grade_report.scoring.stats_engine import Statistics, StatsEngine
from grade_report.scoring.utils import round_half_up
from grade_report.scoring.validator import ExamValidator
from grade_report.services.artifact_writer import (
    build_summary,
    remove_stale,
    write_report,
    write_summary,
)
from grade_report.services.report_generator import generate_student_report

logger = structlog.get_logger(__name__)


@dataclass
class PipelineResult:
    """Everything one successful run produced."""
    parameters: ExamParameters
    scores: Tuple[Decimal, ...]
    statistics: Statistics
    outcome: ScoreOutcome
    summary: ExamSummary
    state: PipelineState
    run_log_path: Path
    summary_path: Path
    report_path: Path


def run_pipeline(
    exam_input: Optional[ExamInput] = None,
    settings: Optional[Settings] = None,
    output_dir: Optional[Path] = None,
) -> PipelineResult:
    """
    Read → validate → compute → report for one student.

    Args:
        exam_input: Raw parameters; read from the environment when omitted.
        settings: Runtime settings; ``get_settings()`` when omitted.
        output_dir: Overrides ``settings.OUTPUT_DIR``.

    Returns:
        PipelineResult with the computed values and artifact paths.

    Raises:
        ExamValidationError: first failed rule. run.log holds the ERROR line
            and no summary or report is written.
    """
    settings = settings or get_settings()
    out_dir = Path(output_dir or settings.OUTPUT_DIR)
    out_dir.mkdir(parents=True, exist_ok=True)

    run_log_path = out_dir / settings.RUN_LOG_NAME
    summary_path = out_dir / settings.SUMMARY_NAME
    report_path = out_dir / settings.REPORT_NAME
    remove_stale([summary_path, report_path])

    state = PipelineState()

    with open_run_log(run_log_path) as run_log:
        run_log.info("Run started")
        logger.info("pipeline_started", output_dir=str(out_dir))

        # STEP 1: READ
        if exam_input is None:
            exam_input = read_exam_input()
        run_log.info("Params %s", json.dumps(exam_input.model_dump()))

        # STEP 2: VALIDATE
        state.advance(PipelineStage.VALIDATING)
        try:
            validated = ExamValidator().validate(exam_input)
        except ExamValidationError as e:
            state.fail(e.message)
            run_log.error("ERROR: %s", e.message)
            logger.warning("validation_failed", field=e.field, error=e.message)
            raise
        run_log.info("Validation passed")
        params, scores = validated.parameters, validated.scores

        # STEP 3: COMPUTE
        state.advance(PipelineStage.COMPUTING)
        stats = StatsEngine().calculate(scores)
        outcome = ScoringPolicy().evaluate(stats, params)
        run_log.info("Stats : %s", json.dumps(stats.as_json()))
        run_log.info(
            "FinalScore = %s Status = %s",
            f"{round_half_up(outcome.final_score):.2f}",
            outcome.status.value,
        )

        # STEP 4: REPORT
        state.advance(PipelineStage.REPORTING)
        summary = build_summary(params, scores, stats, outcome)
        write_summary(summary_path, summary)
        run_log.info("Wrote summary JSON: %s", summary_path)

        html = generate_student_report(
            params, scores, stats, outcome,
            plotlyjs=settings.REPORT_PLOTLYJS,
            chart_height=settings.CHART_HEIGHT,
            app_name=settings.APP_NAME,
        )
        write_report(report_path, html)
        run_log.info("Wrote HTML report: %s", report_path)

        state.advance(PipelineStage.DONE)
        run_log.info("Run finished successfully")

    logger.info(
        "pipeline_finished",
        student_id=params.student_id,
        final_score=float(outcome.final_score),
        status=outcome.status.value,
    )

    return PipelineResult(
        parameters=params,
        scores=scores,
        statistics=stats,
        outcome=outcome,
        summary=summary,
        state=state,
        run_log_path=run_log_path,
        summary_path=summary_path,
        report_path=report_path,
    )
