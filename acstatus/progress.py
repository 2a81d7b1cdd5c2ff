"""Hide a user's own submissions made before a per-problem progress reset."""

from typing import Dict, Iterable, List

from .client.models import ProgressResetItem, Submission
from .status import case_insensitive_user_id


def filter_reset_progress(
    submissions: Iterable[Submission],
    reset_items: Iterable[ProgressResetItem],
    login_user_id: str,
) -> List[Submission]:
    """
    Drop submissions by login_user_id at or before the reset point of their problem.
    Other users' submissions are kept untouched and the order is preserved.
    """
    reset_map: Dict[str, int] = {}
    for item in reset_items:
        current = reset_map.get(item.problem_id)
        if current is None or item.reset_epoch_second > current:
            reset_map[item.problem_id] = item.reset_epoch_second

    login_user = case_insensitive_user_id(login_user_id)

    kept = []
    for s in submissions:
        reset_epoch = reset_map.get(s.problem_id)
        if (
            reset_epoch is not None
            and case_insensitive_user_id(s.user_id) == login_user
            and s.epoch_second <= reset_epoch
        ):
            continue
        kept.append(s)
    return kept
