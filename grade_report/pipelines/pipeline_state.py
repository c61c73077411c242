from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from grade_report.models.enumerations import PipelineStage


# Allowed transitions of a single run. FAILED is absorbing.
TRANSITIONS: Dict[PipelineStage, Tuple[PipelineStage, ...]] = {
    PipelineStage.READING: (PipelineStage.VALIDATING,),
    PipelineStage.VALIDATING: (PipelineStage.COMPUTING, PipelineStage.FAILED),
    PipelineStage.COMPUTING: (PipelineStage.REPORTING,),
    PipelineStage.REPORTING: (PipelineStage.DONE,),
    PipelineStage.DONE: (),
    PipelineStage.FAILED: (),
}


class InvalidTransition(RuntimeError):
    """A run tried to move between stages out of order."""


@dataclass
class PipelineState:
    """
    Tracks the stage of one grading run.
    Lives only as long as the run; nothing is persisted.
    """

    stage: PipelineStage = PipelineStage.READING
    history: List[Tuple[PipelineStage, str]] = field(default_factory=list)
    error: Optional[str] = None

    def __post_init__(self):
        if not self.history:
            self.history.append((self.stage, _now()))

    def advance(self, target: PipelineStage) -> None:
        """Move to ``target`` if the transition is allowed."""
        if target not in TRANSITIONS[self.stage]:
            raise InvalidTransition(f"{self.stage.value} -> {target.value}")
        self.stage = target
        self.history.append((target, _now()))

    def fail(self, message: str) -> None:
        """Enter the absorbing FAILED stage."""
        self.advance(PipelineStage.FAILED)
        self.error = message

    @property
    def is_finished(self) -> bool:
        return not TRANSITIONS[self.stage]

    @property
    def stages_visited(self) -> List[PipelineStage]:
        return [stage for stage, _ in self.history]


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()
