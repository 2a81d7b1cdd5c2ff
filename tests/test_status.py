"""Tests for per-problem status classification."""

import pytest

from acstatus.client.models import (
    FailedStatus,
    StatusLabel,
    SuccessStatus,
    WarningStatus,
)
from acstatus.status import (
    case_insensitive_user_id,
    classify,
    construct_status_label_map,
    is_accepted,
    summarize,
)


class TestHelpers:

    def test_is_accepted(self):
        assert is_accepted("AC") is True
        assert is_accepted("WA") is False
        assert is_accepted("ac") is False

    def test_case_insensitive_user_id(self):
        assert case_insensitive_user_id("Alice") == "alice"


class TestClassify:

    def test_single_rejection_is_warning(self, make_submission):
        subs = [make_submission(1, "p1", "u1", "WA", 100, "C++")]
        assert classify(subs, "u1") == {
            "p1": WarningStatus(
                last_failure_result="WA",
                last_failure_epoch=100,
                rejected_epochs=(100,),
                attempted_languages=frozenset({"C++"}),
            )
        }

    def test_rejection_then_acceptance_is_success(self, make_submission):
        subs = [
            make_submission(1, "p1", "u1", "WA", 100, "C++"),
            make_submission(2, "p1", "u1", "AC", 200, "Python"),
        ]
        assert classify(subs, "u1") == {
            "p1": SuccessStatus(
                first_accepted_epoch=200,
                last_accepted_epoch=200,
                solved_languages=frozenset({"Python"}),
                rejected_epochs=(100,),
            )
        }

    def test_rival_acceptance_is_failed(self, make_submission):
        subs = [make_submission(1, "p1", "rival", "AC", 50)]
        assert classify(subs, "u1") == {
            "p1": FailedStatus(solved_rivals=frozenset({"rival"}), rejected_epochs=())
        }

    def test_unsubmitted_problem_is_absent(self, make_submission):
        subs = [make_submission(1, "p1", "u1", "AC", 100)]
        result = classify(subs, "u1")
        assert "p2" not in result
        assert classify([], "u1") == {}

    def test_every_problem_appears_once(self, make_submission):
        subs = [
            make_submission(1, "p1", "u1", "AC"),
            make_submission(2, "p2", "rival", "WA"),
            make_submission(3, "p3", "rival", "AC"),
            make_submission(4, "p1", "rival", "AC"),
            make_submission(5, "p4", "u1", "TLE"),
        ]
        result = classify(subs, "u1")
        assert set(result) == {"p1", "p2", "p3", "p4"}

    def test_rival_rejection_only(self, make_submission):
        # neither branch fires for the user, and no rival accepted
        subs = [make_submission(1, "p1", "rival", "WA")]
        result = classify(subs, "u1")
        assert result["p1"].label == StatusLabel.NONE

    def test_success_wins_over_rivals_and_rejections(self, make_submission):
        subs = [
            make_submission(1, "p1", "rival", "AC", 10),
            make_submission(2, "p1", "u1", "WA", 20),
            make_submission(3, "p1", "u1", "AC", 30, "Rust"),
            make_submission(4, "p1", "other", "AC", 40),
        ]
        status = classify(subs, "u1")["p1"]
        assert isinstance(status, SuccessStatus)

    def test_success_epochs_and_languages(self, make_submission):
        subs = [
            make_submission(1, "p1", "u1", "WA", 100),
            make_submission(2, "p1", "u1", "AC", 300, "C++"),
            make_submission(3, "p1", "u1", "RE", 250),
            make_submission(4, "p1", "u1", "AC", 200, "Python"),
            make_submission(5, "p1", "u1", "WA", 400),
        ]
        status = classify(subs, "u1")["p1"]
        assert status.first_accepted_epoch == 200
        assert status.last_accepted_epoch == 300
        assert status.solved_languages == frozenset({"C++", "Python"})
        # rejections after the first acceptance are dropped
        assert status.rejected_epochs == (100,)

    def test_rejection_at_first_acceptance_epoch_is_dropped(self, make_submission):
        subs = [
            make_submission(1, "p1", "u1", "WA", 200),
            make_submission(2, "p1", "u1", "AC", 200),
        ]
        assert classify(subs, "u1")["p1"].rejected_epochs == ()

    def test_failed_keeps_all_rejections_and_rival_casing(self, make_submission):
        subs = [
            make_submission(1, "p1", "u1", "WA", 100),
            make_submission(2, "p1", "Rival", "AC", 150),
            make_submission(3, "p1", "Rival", "AC", 160),
            make_submission(4, "p1", "u1", "TLE", 300),
            make_submission(5, "p1", "other", "AC", 310),
        ]
        status = classify(subs, "u1")["p1"]
        assert status == FailedStatus(
            solved_rivals=frozenset({"Rival", "other"}),
            rejected_epochs=(100, 300),
        )

    def test_warning_picks_smallest_id_rejection(self, make_submission):
        subs = [
            make_submission(7, "p1", "u1", "TLE", 700, "Python"),
            make_submission(3, "p1", "u1", "WA", 300, "C++"),
            make_submission(9, "p1", "u1", "RE", 900, "C++"),
        ]
        status = classify(subs, "u1")["p1"]
        assert status.last_failure_result == "WA"
        assert status.last_failure_epoch == 300
        assert status.rejected_epochs == (700, 300, 900)
        assert status.attempted_languages == frozenset({"Python", "C++"})

    def test_warning_ignores_rival_rejections(self, make_submission):
        subs = [
            make_submission(1, "p1", "rival", "WA", 100),
            make_submission(2, "p1", "u1", "CE", 200),
        ]
        status = classify(subs, "u1")["p1"]
        assert isinstance(status, WarningStatus)
        assert status.rejected_epochs == (200,)

    @pytest.mark.parametrize("user_id", ["Alice", "alice", "ALICE"])
    def test_user_id_is_case_insensitive(self, make_submission, user_id):
        subs = [
            make_submission(1, "p1", "alice", "AC", 100),
            make_submission(2, "p2", "alice", "WA", 200),
            make_submission(3, "p3", "bob", "AC", 300),
        ]
        assert classify(subs, user_id) == classify(subs, "alice")
        assert classify(subs, user_id)["p1"].label == StatusLabel.SUCCESS

    def test_submission_casing_is_case_insensitive(self, make_submission):
        subs = [make_submission(1, "p1", "ALICE", "AC", 100)]
        assert isinstance(classify(subs, "alice")["p1"], SuccessStatus)

    def test_input_is_not_mutated(self, make_submission):
        subs = [
            make_submission(1, "p1", "u1", "WA"),
            make_submission(5, "p1", "u1", "WA"),
            make_submission(3, "p1", "u1", "WA"),
        ]
        before = list(subs)
        classify(subs, "u1")
        assert subs == before

    def test_idempotent(self, make_submission):
        subs = [
            make_submission(1, "p1", "u1", "WA"),
            make_submission(2, "p2", "r", "AC"),
            make_submission(3, "p3", "u1", "AC"),
        ]
        assert classify(subs, "u1") == classify(subs, "u1")

    def test_accepts_generator(self, make_submission):
        subs = (make_submission(i, "p1", "u1", "WA") for i in range(3))
        assert classify(subs, "u1")["p1"].last_failure_epoch == 0

    def test_alias(self):
        assert construct_status_label_map is classify


class TestSummarize:

    def test_counts_every_label(self, make_submission):
        subs = [
            make_submission(1, "p1", "u1", "AC"),
            make_submission(2, "p2", "u1", "AC"),
            make_submission(3, "p3", "r", "AC"),
            make_submission(4, "p4", "u1", "WA"),
        ]
        counts = summarize(classify(subs, "u1"))
        assert counts == {
            StatusLabel.SUCCESS: 2,
            StatusLabel.FAILED: 1,
            StatusLabel.WARNING: 1,
            StatusLabel.NONE: 0,
        }

    def test_empty(self):
        assert set(summarize({}).values()) == {0}
