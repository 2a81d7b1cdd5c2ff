"""Global configuration management (~/.acstatus.global)."""

import json
from pathlib import Path
from typing import List, Optional
from dataclasses import dataclass, field

from ..client.client import DEFAULT_BASE_URL


@dataclass
class GlobalConfig:
    """
    Global configuration storing the tracked user and their rivals.
    Stored at ~/.acstatus.global
    """

    user_id: str = ""
    rivals: List[str] = field(default_factory=list)
    base_url: str = DEFAULT_BASE_URL

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "GlobalConfig":
        """Load global config from file."""
        if path is None:
            path = Path.home() / ".acstatus.global"

        if not path.exists():
            return cls()

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
                user_id = data.get("user_id", "")
                rivals = data.get("rivals", [])
                base_url = data.get("base_url", DEFAULT_BASE_URL)
        except (json.JSONDecodeError, IOError, AttributeError):
            return cls()

        if (
            not isinstance(user_id, str)
            or not isinstance(base_url, str)
            or not isinstance(rivals, list)
            or not all(isinstance(r, str) for r in rivals)
        ):
            return cls()
        return cls(user_id=user_id, rivals=rivals, base_url=base_url)

    def save(self, path: Optional[Path] = None) -> None:
        """Save global config to file."""
        if path is None:
            path = Path.home() / ".acstatus.global"

        data = {
            "user_id": self.user_id,
            "rivals": self.rivals,
            "base_url": self.base_url,
        }
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def has_user(self) -> bool:
        """Check if a user id is stored."""
        return bool(self.user_id)

    def add_rival(self, rival: str) -> bool:
        """Add a rival unless already tracked (case-insensitive)."""
        if any(r.lower() == rival.lower() for r in self.rivals):
            return False
        self.rivals.append(rival)
        return True

    def remove_rival(self, rival: str) -> bool:
        """Remove a rival, returns False if it was not tracked."""
        remaining = [r for r in self.rivals if r.lower() != rival.lower()]
        if len(remaining) == len(self.rivals):
            return False
        self.rivals = remaining
        return True
