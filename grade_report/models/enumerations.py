from enum import Enum

class GradeStatus(str, Enum):
    PASS = "PASS"
    FAIL = "FAIL"

class PipelineStage(str, Enum):
    READING = "reading"        # Pulling raw parameters from the environment
    VALIDATING = "validating"  # Fail-fast rule checks
    COMPUTING = "computing"    # Statistics and final score
    REPORTING = "reporting"    # Writing summary.json / report.html
    DONE = "done"
    FAILED = "failed"          # Absorbing; only reachable from VALIDATING
