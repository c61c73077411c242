from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel
from decimal import Decimal
from typing import Union

from grade_report.models.enumerations import GradeStatus

JsonNumber = Union[int, float]


class ExamParameters(BaseModel):
    """
    Validated exam parameters for one student.

    Built by the Validator once every rule has passed; immutable afterwards.
    """

    model_config = ConfigDict(frozen=True)

    student_name: str = Field(
        ...,
        min_length=2,
        description="Student's display name"
    )

    student_id: str = Field(
        ...,
        pattern=r"^[0-9]{5,12}$",
        description="Numeric student identifier, 5-12 digits"
    )

    raw_scores: str = Field(
        ...,
        description="Comma-separated scores as supplied"
    )

    exam_date: str = Field(
        ...,
        pattern=r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$",
        description="Exam date as YYYY-MM-DD"
    )

    has_bonus: bool = Field(
        default=False,
        description="Whether bonus points are added to the average"
    )

    bonus_points: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        le=20,
        description="Bonus points, only applied when has_bonus is set"
    )

    pass_threshold: Decimal = Field(
        default=Decimal("60"),
        ge=0,
        le=100,
        description="Minimum final score for PASS"
    )


class ExamSummary(BaseModel):
    """
    Contents of summary.json.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    students: int = Field(default=1, ge=1)
    scores_count: int = Field(..., ge=2)
    average: JsonNumber
    min_score: JsonNumber = Field(..., alias="min")
    max_score: JsonNumber = Field(..., alias="max")
    final_score: JsonNumber
    status: GradeStatus
    exam_date: str
    pass_threshold: JsonNumber
    bonus_applied: bool
    bonus_points: JsonNumber

    @model_validator(mode="after")
    def validate_final_score(self):
        """Ensure the final score stays within [0, 100]."""
        if not 0 <= self.final_score <= 100:
            raise ValueError("finalScore must be between 0 and 100")
        return self
