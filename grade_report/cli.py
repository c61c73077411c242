"""
Grade one student from environment variables.

Usage:
    STUDENT_NAME="Jane Doe" STUDENT_ID=12345 SCORES=90,78,100 EXAM_DATE=2024-05-01 \\
        python -m grade_report                          # writes ./output/
    python -m grade_report --output-dir build/report    # custom directory
    python -m grade_report --log-format json            # JSON diagnostics on stderr

Exit code is 0 when the run completes (PASS or FAIL) and 1 when the input
fails validation.
"""

import argparse
import sys
from typing import List, Optional

from grade_report import __version__
from grade_report.config import EXAM_ENV_VARS, get_settings
from grade_report.core.exceptions import ExamValidationError
from grade_report.core.logging_utils import configure_logging
from grade_report.pipelines.runner import run_pipeline
from grade_report.services.artifact_writer import summary_to_json


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="grade-report",
        description="Validate exam parameters and generate a grade report",
        epilog="Exam input variables: " + ", ".join(EXAM_ENV_VARS),
    )
    ap.add_argument("--output-dir", help="Directory for run.log, summary.json and report.html")
    ap.add_argument("--log-format", choices=["json", "console"], help="Diagnostic log format")
    ap.add_argument(
        "--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], type=str.upper,
        help="Diagnostic log level",
    )
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.log_format:
        overrides["LOG_FORMAT"] = args.log_format
    if args.log_level:
        overrides["LOG_LEVEL"] = args.log_level
    settings = get_settings().model_copy(update=overrides)
    configure_logging(settings)

    try:
        result = run_pipeline(settings=settings, output_dir=args.output_dir)
    except ExamValidationError as e:
        print(e.message, file=sys.stderr)
        return 1

    print(f"OK: report generated at {result.report_path}")
    print(f"Summary: {summary_to_json(result.summary)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
