# grade_report/scoring/stats_engine.py
"""
Stats Engine
------------
Descriptive statistics over a ScoreSet.

Formula:
    average = Σ score / n
    std_dev = sqrt( Σ (score − average)² / n )      population, not n − 1
"""
import structlog
from dataclasses import asdict, dataclass
from decimal import Decimal, localcontext
from typing import Any, Dict, Sequence

from grade_report.scoring.utils import population_std_dev, to_json_number, working_precision

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Statistics:
    """Output of StatsEngine.calculate()."""
    count: int
    min: Decimal
    max: Decimal
    sum: Decimal
    average: Decimal
    standard_deviation: Decimal

    def as_json(self) -> Dict[str, Any]:
        """Plain JSON-friendly dict, used for the run log."""
        return {
            k: (to_json_number(v) if isinstance(v, Decimal) else v)
            for k, v in asdict(self).items()
        }


class StatsEngine:
    """Calculate count, extrema, sum, average and population std dev."""

    def calculate(self, scores: Sequence[Decimal]) -> Statistics:
        """
        Args:
            scores: Non-empty sequence of scores. Order does not matter here.

        Returns:
            Statistics for the sequence.

        Raises:
            ValueError: if ``scores`` is empty.
        """
        if not scores:
            raise ValueError("scores must not be empty")

        count = len(scores)
        # Sum must be exact so the average stays within [min, max].
        with localcontext() as ctx:
            ctx.prec = working_precision(scores)
            total = sum(scores, Decimal("0"))
            average = total / count
            std_dev = population_std_dev(scores, average)

        stats = Statistics(
            count=count,
            min=min(scores),
            max=max(scores),
            sum=total,
            average=average,
            standard_deviation=std_dev,
        )

        logger.info(
            "stats_calculated",
            count=count,
            min=float(stats.min),
            max=float(stats.max),
            average=float(average),
            standard_deviation=float(std_dev),
        )
        return stats
