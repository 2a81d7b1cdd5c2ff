"""Per-problem status classification of a user's submissions against rivals."""

from collections import defaultdict
from typing import Dict, Iterable, List, Mapping

from .client.models import (
    FailedStatus,
    NoneStatus,
    ProblemStatus,
    StatusLabel,
    Submission,
    SuccessStatus,
    WarningStatus,
)

ACCEPTED = "AC"


def is_accepted(result: str) -> bool:
    """Check if a verdict code means the submission passed."""
    return result == ACCEPTED


def case_insensitive_user_id(user_id: str) -> str:
    """Canonical form of a user id for identity comparison."""
    return user_id.lower()


def classify(submissions: Iterable[Submission], user_id: str) -> Dict[str, ProblemStatus]:
    """
    Reduce the submissions of a user and their rivals to one status per problem.

    Only problems that appear in the submissions become keys of the result.
    A problem the user solved is always a SuccessStatus. Otherwise a rival's
    acceptance gives FailedStatus, and the user's own rejections alone give
    WarningStatus.
    """
    target = case_insensitive_user_id(user_id)

    submission_map: Dict[str, List[Submission]] = defaultdict(list)
    for submission in submissions:
        submission_map[submission.problem_id].append(submission)

    status_map: Dict[str, ProblemStatus] = {}
    for problem_id, group in submission_map.items():
        status_map[problem_id] = _classify_problem(group, target)

    return status_map


construct_status_label_map = classify


def _classify_problem(group: List[Submission], target: str) -> ProblemStatus:
    user_accepted = []
    user_rejected = []
    rival_accepted = []
    for s in group:
        is_user = case_insensitive_user_id(s.user_id) == target
        if is_user and is_accepted(s.result):
            user_accepted.append(s)
        elif is_user:
            user_rejected.append(s)
        elif is_accepted(s.result):
            rival_accepted.append(s)

    rejected_epochs = tuple(s.epoch_second for s in user_rejected)

    if user_accepted:
        first_accepted = min(s.epoch_second for s in user_accepted)
        return SuccessStatus(
            first_accepted_epoch=first_accepted,
            last_accepted_epoch=max(s.epoch_second for s in user_accepted),
            solved_languages=frozenset(s.language for s in user_accepted),
            rejected_epochs=tuple(e for e in rejected_epochs if e < first_accepted),
        )

    if rival_accepted:
        return FailedStatus(
            solved_rivals=frozenset(s.user_id for s in rival_accepted),
            rejected_epochs=rejected_epochs,
        )

    if user_rejected:
        # Tail of the id-descending order, i.e. the smallest id.
        last = sorted(user_rejected, key=lambda s: s.id, reverse=True)[-1]
        return WarningStatus(
            last_failure_result=last.result,
            last_failure_epoch=last.epoch_second,
            rejected_epochs=rejected_epochs,
            attempted_languages=frozenset(s.language for s in user_rejected),
        )

    # Only rejections by rivals.
    return NoneStatus()


def summarize(status_map: Mapping[str, ProblemStatus]) -> Dict[StatusLabel, int]:
    """Count problems per status label, listing every label."""
    counts = {label: 0 for label in StatusLabel}
    for status in status_map.values():
        counts[status.label] += 1
    return counts
