"""HTTP client for the AtCoder Problems submissions API."""

import time
from typing import Iterable, List, Optional

import requests

from .models import Submission, SubmissionFormatError
from ..utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://kenkoooo.com/atcoder"
PAGE_SIZE = 500


class AtCoderProblemsClient:
    """Fetches submission histories from AtCoder Problems."""

    SUBMISSIONS_PATH = "/atcoder-api/v3/user/submissions"

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        request_interval: float = 1.0,
        timeout: float = 30.0,
    ):
        """Initialize the client."""
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.request_interval = request_interval
        self.timeout = timeout
        self._last_request_time = 0.0

    def _wait(self) -> None:
        elapsed = time.monotonic() - self._last_request_time
        if elapsed < self.request_interval:
            time.sleep(self.request_interval - elapsed)
        self._last_request_time = time.monotonic()

    def _get(self, path: str, **params):
        """Make GET request and decode the JSON body."""
        self._wait()
        url = f"{self.base_url}{path}"
        logger.debug("GET %s %s", url, params)
        response = self.session.get(url, params=params, timeout=self.timeout)
        response.raise_for_status()
        try:
            return response.json()
        except ValueError as e:
            raise SubmissionFormatError(f"invalid JSON from {url}: {e}") from e

    def fetch_user_submissions(self, user_id: str, from_second: int = 0) -> List[Submission]:
        """
        Fetch every submission of a user made at or after from_second.
        Follows pages until the API returns fewer than PAGE_SIZE records
        or a page adds nothing new.
        """
        submissions: List[Submission] = []
        seen_ids = set()
        while True:
            page = self._get(self.SUBMISSIONS_PATH, user=user_id, from_second=from_second)
            if not isinstance(page, list):
                raise SubmissionFormatError(
                    f"expected a list of submissions, got {type(page).__name__}"
                )

            parsed = [Submission.from_dict(item) for item in page]
            new = [s for s in parsed if s.id not in seen_ids]
            seen_ids.update(s.id for s in new)
            submissions.extend(new)
            logger.debug(
                "Fetched %d new submissions of %s from %d", len(new), user_id, from_second
            )

            if len(parsed) < PAGE_SIZE or not new:
                break
            # from_second is inclusive and a page may end mid-second
            from_second = max(s.epoch_second for s in parsed)

        logger.info("Fetched %d submissions of %s", len(submissions), user_id)
        return submissions

    def fetch_submissions(self, user_id: str, rivals: Iterable[str] = ()) -> List[Submission]:
        """Fetch submissions of the user and each distinct rival, concatenated."""
        seen = {user_id.lower()}
        users = [user_id]
        for rival in rivals:
            if rival.lower() not in seen:
                seen.add(rival.lower())
                users.append(rival)

        submissions: List[Submission] = []
        for user in users:
            submissions.extend(self.fetch_user_submissions(user))
        return submissions
