# tests/conftest.py

"""
Pytest Fixtures - Shared configuration and exam inputs for all tests

SCENARIO REFERENCE:
- A: Jane Doe, 90,78,100             -> average 89.33, PASS
- B: Jane Doe, 40,30                 -> average 35, FAIL
- C: Jo, 90,150                      -> score out of range
- D: 90,78 + bonus 20, threshold 90  -> final 100, PASS
"""

import pytest
from decimal import Decimal

from grade_report.config import EXAM_ENV_VARS, ExamInput, Settings, get_settings
from grade_report.models.exam import ExamParameters


RUNTIME_ENV_VARS = ["OUTPUT_DIR", "LOG_LEVEL", "LOG_FORMAT", "REPORT_PLOTLYJS"]


# =============================================================================
# ENVIRONMENT ISOLATION
# =============================================================================

@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Every test starts without exam variables and in an empty directory."""
    for name in list(EXAM_ENV_VARS) + RUNTIME_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def exam_env(monkeypatch):
    """Set exam variables: exam_env(STUDENT_NAME="Jane Doe", ...)."""
    def _set(**values):
        for name, value in values.items():
            monkeypatch.setenv(name, value)
    return _set


@pytest.fixture
def scenario_a_env(exam_env):
    exam_env(
        STUDENT_NAME="Jane Doe",
        STUDENT_ID="12345",
        SCORES="90,78,100",
        EXAM_DATE="2024-05-01",
    )


# =============================================================================
# SETTINGS / INPUT FIXTURES
# =============================================================================

@pytest.fixture
def output_dir(tmp_path):
    return tmp_path / "output"


@pytest.fixture
def settings():
    """Settings that ignore any .env file and link plotly.js from the CDN."""
    return Settings(_env_file=None, REPORT_PLOTLYJS="cdn")


@pytest.fixture
def make_input():
    """Build an ExamInput from Scenario A with overrides."""
    def _make(**overrides):
        values = dict(
            student_name="Jane Doe",
            student_id="12345",
            scores="90,78,100",
            exam_date="2024-05-01",
        )
        values.update(overrides)
        return ExamInput(**values)
    return _make


@pytest.fixture
def sample_params():
    return ExamParameters(
        student_name="Jane Doe",
        student_id="12345",
        raw_scores="90,78,100",
        exam_date="2024-05-01",
        has_bonus=False,
        bonus_points=Decimal("0"),
        pass_threshold=Decimal("60"),
    )


@pytest.fixture
def sample_scores():
    return (Decimal("90"), Decimal("78"), Decimal("100"))
