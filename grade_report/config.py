"""Application configuration and exam input settings."""
from typing import Literal
from functools import lru_cache
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# =============================================================================
# EXAM INPUT ENVIRONMENT
# =============================================================================
# Environment variable -> ExamInput field
# - Every variable is optional at read time; the Validator decides what is
#   actually required.
# =============================================================================

EXAM_ENV_VARS = {
    "STUDENT_NAME": "student_name",
    "STUDENT_ID": "student_id",
    "SCORES": "scores",
    "EXAM_DATE": "exam_date",
    "HAS_BONUS": "has_bonus",
    "BONUS_POINTS": "bonus_points",
    "PASS_THRESHOLD": "pass_threshold",
}

DEFAULT_BONUS_POINTS = "0"
DEFAULT_PASS_THRESHOLD = "60"


class Settings(BaseSettings):
    """Runtime settings for a grading run."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Exam Grade Report"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "console"

    # Artifacts
    OUTPUT_DIR: str = "output"
    RUN_LOG_NAME: str = "run.log"
    SUMMARY_NAME: str = "summary.json"
    REPORT_NAME: str = "report.html"
    REPORT_PLOTLYJS: Literal["inline", "cdn"] = "inline"
    CHART_HEIGHT: int = Field(default=260, ge=120, le=1200)

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @model_validator(mode="after")
    def validate_artifact_names(self):
        """Ensure the three artifacts never overwrite each other."""
        names = {self.RUN_LOG_NAME, self.SUMMARY_NAME, self.REPORT_NAME}
        if len(names) != 3:
            raise ValueError("RUN_LOG_NAME, SUMMARY_NAME and REPORT_NAME must differ")
        return self


class ExamInput(BaseSettings):
    """
    Raw exam parameters exactly as found in the environment.

    Nothing here can fail: text fields default to empty strings, the numeric
    fields stay as text until the Validator parses them, and ``has_bonus`` is
    only true for a case-insensitive ``"true"``.
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    student_name: str = ""
    student_id: str = ""
    scores: str = ""
    exam_date: str = ""
    has_bonus: bool = False
    bonus_points: str = DEFAULT_BONUS_POINTS
    pass_threshold: str = DEFAULT_PASS_THRESHOLD

    @field_validator("has_bonus", mode="before")
    @classmethod
    def parse_has_bonus(cls, v) -> bool:
        if isinstance(v, bool):
            return v
        return str(v).strip().lower() == "true"

    @field_validator("bonus_points", mode="before")
    @classmethod
    def default_blank_bonus(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_BONUS_POINTS
        return str(v)

    @field_validator("pass_threshold", mode="before")
    @classmethod
    def default_blank_threshold(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_PASS_THRESHOLD
        return str(v)

    @field_validator("student_name", "student_id", "scores", "exam_date", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else str(v)


def read_exam_input() -> ExamInput:
    """Read the exam parameters from the process environment."""
    return ExamInput()


@lru_cache
def get_settings() -> Settings:
    return Settings()
