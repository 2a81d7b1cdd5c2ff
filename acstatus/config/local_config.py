"""Local configuration management (.acstatus.local)."""

import json
from pathlib import Path
from typing import List, Optional
from dataclasses import dataclass, field

from ..client.models import ProgressResetItem, SubmissionFormatError


@dataclass
class LocalConfig:
    """
    Local configuration for project-specific settings.
    Stored at .acstatus.local in project directory.
    Stores the progress reset list of the configured user.
    """

    progress_resets: List[ProgressResetItem] = field(default_factory=list)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> Optional["LocalConfig"]:
        """
        Load local config from file.
        If path is not specified, searches upward from current directory.
        """
        if path is None:
            path = cls.find_config()

        if path is None or not path.exists():
            return None

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
                items = [
                    ProgressResetItem.from_dict(item)
                    for item in data.get("progress_resets", [])
                ]
                return cls(progress_resets=items)
        except (json.JSONDecodeError, IOError, AttributeError, TypeError, SubmissionFormatError):
            return None

    def save(self, path: Optional[Path] = None) -> None:
        """Save local config to file."""
        if path is None:
            path = Path.cwd() / ".acstatus.local"

        data = {"progress_resets": [item.to_dict() for item in self.progress_resets]}

        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def add_reset(self, problem_id: str, reset_epoch_second: int) -> None:
        """Set the reset point of a problem, replacing any previous one."""
        self.remove_reset(problem_id)
        self.progress_resets.append(ProgressResetItem(problem_id, reset_epoch_second))

    def remove_reset(self, problem_id: str) -> bool:
        remaining = [i for i in self.progress_resets if i.problem_id != problem_id]
        removed = len(remaining) != len(self.progress_resets)
        self.progress_resets = remaining
        return removed

    @staticmethod
    def find_config() -> Optional[Path]:
        """
        Search for .acstatus.local starting from current directory,
        walking up to root.
        """
        current = Path.cwd()

        while True:
            config_path = current / ".acstatus.local"
            if config_path.exists():
                return config_path

            # Check if we've reached the root
            if current == current.parent:
                return None

            current = current.parent
