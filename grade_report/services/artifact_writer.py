"""
Artifact writer
grade_report/services/artifact_writer.py

Builds summary.json and writes the report files into the output directory.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, Sequence
from decimal import Decimal

from grade_report.models.exam import ExamParameters, ExamSummary
from grade_report.scoring.scoring_policy import ScoreOutcome
from grade_report.scoring.stats_engine import Statistics
from grade_report.scoring.utils import round_half_up, to_json_number

logger = logging.getLogger(__name__)


def build_summary(
    params: ExamParameters,
    scores: Sequence[Decimal],
    stats: Statistics,
    outcome: ScoreOutcome,
) -> ExamSummary:
    """Assemble the summary document; min/max come from the scores themselves."""
    return ExamSummary(
        students=1,
        scores_count=len(scores),
        average=to_json_number(stats.average),
        min_score=to_json_number(min(scores)),
        max_score=to_json_number(max(scores)),
        final_score=to_json_number(round_half_up(outcome.final_score)),
        status=outcome.status,
        exam_date=params.exam_date,
        pass_threshold=to_json_number(params.pass_threshold),
        bonus_applied=params.has_bonus,
        bonus_points=to_json_number(outcome.bonus_applied),
    )


def summary_to_json(summary: ExamSummary) -> str:
    """Pretty-printed JSON with camelCase keys."""
    return json.dumps(summary.model_dump(mode="json", by_alias=True), indent=2)


def write_summary(path: Path, summary: ExamSummary) -> Path:
    path.write_text(summary_to_json(summary), encoding="utf-8")
    logger.debug("Wrote %s", path)
    return path


def write_report(path: Path, html: str) -> Path:
    path.write_text(html, encoding="utf-8")
    logger.debug("Wrote %s", path)
    return path


def remove_stale(paths: Iterable[Path]) -> None:
    """Delete artifacts left behind by a previous run."""
    for path in paths:
        if path.exists():
            path.unlink()
            logger.debug("Removed stale artifact %s", path)
