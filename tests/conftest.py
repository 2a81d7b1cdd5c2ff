import pytest

from acstatus.client.models import Submission


@pytest.fixture
def make_submission():
    """Factory for submissions with sensible defaults."""

    def _make(id, problem_id="abc100_a", user_id="u1", result="AC", epoch_second=None, language="C++"):
        return Submission(
            id=id,
            problem_id=problem_id,
            user_id=user_id,
            result=result,
            epoch_second=epoch_second if epoch_second is not None else id * 100,
            language=language,
        )

    return _make
