"""
scoring/scoring_policy.py

Final score and PASS/FAIL classification.

Formula:
    final_raw   = average + (bonus_points if has_bonus else 0)
    final_score = min(final_raw, 100)                  upper clamp only
    status      = PASS if final_score >= pass_threshold else FAIL
"""

from dataclasses import dataclass
from decimal import Decimal

import structlog

from grade_report.models.enumerations import GradeStatus
from grade_report.models.exam import ExamParameters
from grade_report.scoring.stats_engine import Statistics
from grade_report.scoring.utils import clamp_upper

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ScoreOutcome:
    """Output of ScoringPolicy.evaluate()."""
    final_score: Decimal    # <= MAX_FINAL_SCORE, unrounded
    status: GradeStatus
    bonus_applied: Decimal  # 0 when has_bonus is false

    @property
    def passed(self) -> bool:
        return self.status is GradeStatus.PASS


class ScoringPolicy:
    """Combine the average with the optional bonus and classify."""

    MAX_FINAL_SCORE: Decimal = Decimal("100")

    def evaluate(self, stats: Statistics, params: ExamParameters) -> ScoreOutcome:
        """
        Args:
            stats: Statistics of the student's ScoreSet.
            params: Validated exam parameters (bonus flag/points, threshold).

        Returns:
            ScoreOutcome with the clamped final score and PASS/FAIL.
        """
        bonus = params.bonus_points if params.has_bonus else Decimal("0")
        final_score = clamp_upper(stats.average + bonus, self.MAX_FINAL_SCORE)
        status = (
            GradeStatus.PASS if final_score >= params.pass_threshold else GradeStatus.FAIL
        )

        logger.info(
            "score_outcome_calculated",
            average=float(stats.average),
            bonus_applied=float(bonus),
            final_score=float(final_score),
            pass_threshold=float(params.pass_threshold),
            status=status.value,
        )
        return ScoreOutcome(final_score=final_score, status=status, bonus_applied=bonus)
