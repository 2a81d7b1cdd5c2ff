"""acstatus - per-problem solve status of a user against rivals."""

__version__ = "1.0.0"

from .client.models import (
    FailedStatus,
    NoneStatus,
    ProblemStatus,
    ProgressResetItem,
    StatusLabel,
    Submission,
    SubmissionFormatError,
    SuccessStatus,
    WarningStatus,
)
from .progress import filter_reset_progress
from .status import (
    case_insensitive_user_id,
    classify,
    construct_status_label_map,
    is_accepted,
    summarize,
)

__all__ = [
    "FailedStatus",
    "NoneStatus",
    "ProblemStatus",
    "ProgressResetItem",
    "StatusLabel",
    "Submission",
    "SubmissionFormatError",
    "SuccessStatus",
    "WarningStatus",
    "case_insensitive_user_id",
    "classify",
    "construct_status_label_map",
    "filter_reset_progress",
    "is_accepted",
    "summarize",
]
