"""Client module for AtCoder Problems interaction."""

from .client import AtCoderProblemsClient, DEFAULT_BASE_URL
from .models import (
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

__all__ = [
    "AtCoderProblemsClient",
    "DEFAULT_BASE_URL",
    "FailedStatus",
    "NoneStatus",
    "ProblemStatus",
    "ProgressResetItem",
    "StatusLabel",
    "Submission",
    "SubmissionFormatError",
    "SuccessStatus",
    "WarningStatus",
]
