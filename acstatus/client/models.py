"""Data models for AtCoder Problems entities and derived problem statuses."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, FrozenSet, Mapping, Optional, Tuple, Union


class SubmissionFormatError(ValueError):
    """Raised when a record from the API does not look like a submission."""


def _require(data: Mapping[str, Any], key: str, kind: type, where: str) -> Any:
    if key not in data or data[key] is None:
        raise SubmissionFormatError(f"{where}: missing field '{key}'")
    value = data[key]
    # bool is a subclass of int
    if isinstance(value, bool) or not isinstance(value, kind):
        raise SubmissionFormatError(
            f"{where}: field '{key}' must be {kind.__name__}, "
            f"got {type(value).__name__}"
        )
    return value


def _optional(data: Mapping[str, Any], key: str, kinds: Tuple[type, ...], where: str) -> Any:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, kinds):
        raise SubmissionFormatError(
            f"{where}: field '{key}' has unexpected type {type(value).__name__}"
        )
    return value


@dataclass(frozen=True)
class Submission:
    """A single judged submission as returned by the submissions API."""

    id: int
    problem_id: str
    user_id: str
    result: str
    epoch_second: int
    language: str
    contest_id: Optional[str] = None
    point: Optional[float] = None
    length: Optional[int] = None
    execution_time: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Submission":
        """
        Build a submission from a decoded JSON object.
        Raises SubmissionFormatError if a required field is missing or mistyped.
        """
        if not isinstance(data, Mapping):
            raise SubmissionFormatError(
                f"submission must be an object, got {type(data).__name__}"
            )

        where = "submission"
        if isinstance(data.get("id"), int) and not isinstance(data.get("id"), bool):
            where = f"submission {data['id']}"

        point = _optional(data, "point", (int, float), where)
        return cls(
            id=_require(data, "id", int, where),
            problem_id=_require(data, "problem_id", str, where),
            user_id=_require(data, "user_id", str, where),
            result=_require(data, "result", str, where),
            epoch_second=_require(data, "epoch_second", int, where),
            language=_require(data, "language", str, where),
            contest_id=_optional(data, "contest_id", (str,), where),
            point=float(point) if point is not None else None,
            length=_optional(data, "length", (int,), where),
            execution_time=_optional(data, "execution_time", (int,), where),
        )


@dataclass(frozen=True)
class ProgressResetItem:
    """Reset point for one problem: the user's earlier submissions are hidden."""

    problem_id: str
    reset_epoch_second: int

    @classmethod
    def from_dict(cls, data: Any) -> "ProgressResetItem":
        if not isinstance(data, Mapping):
            raise SubmissionFormatError(
                f"progress reset item must be an object, got {type(data).__name__}"
            )
        return cls(
            problem_id=_require(data, "problem_id", str, "progress reset item"),
            reset_epoch_second=_require(
                data, "reset_epoch_second", int, "progress reset item"
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "problem_id": self.problem_id,
            "reset_epoch_second": self.reset_epoch_second,
        }


class StatusLabel(Enum):
    """Kind of a problem status."""

    SUCCESS = "success"
    FAILED = "failed"
    WARNING = "warning"
    NONE = "none"


@dataclass(frozen=True)
class SuccessStatus:
    """
    The user solved the problem.
    rejected_epochs only holds rejections made before the first acceptance.
    """

    label: ClassVar[StatusLabel] = StatusLabel.SUCCESS

    first_accepted_epoch: int
    last_accepted_epoch: int
    solved_languages: FrozenSet[str] = frozenset()
    rejected_epochs: Tuple[int, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label.value,
            "first_accepted_epoch": self.first_accepted_epoch,
            "last_accepted_epoch": self.last_accepted_epoch,
            "solved_languages": sorted(self.solved_languages),
            "rejected_epochs": list(self.rejected_epochs),
        }


@dataclass(frozen=True)
class FailedStatus:
    """A rival solved the problem and the user did not."""

    label: ClassVar[StatusLabel] = StatusLabel.FAILED

    solved_rivals: FrozenSet[str] = frozenset()
    rejected_epochs: Tuple[int, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label.value,
            "solved_rivals": sorted(self.solved_rivals),
            "rejected_epochs": list(self.rejected_epochs),
        }


@dataclass(frozen=True)
class WarningStatus:
    """The user tried and failed, and nobody tracked has solved it."""

    label: ClassVar[StatusLabel] = StatusLabel.WARNING

    last_failure_result: str
    last_failure_epoch: int
    rejected_epochs: Tuple[int, ...] = ()
    attempted_languages: FrozenSet[str] = frozenset()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label.value,
            "last_failure_result": self.last_failure_result,
            "last_failure_epoch": self.last_failure_epoch,
            "rejected_epochs": list(self.rejected_epochs),
            "attempted_languages": sorted(self.attempted_languages),
        }


@dataclass(frozen=True)
class NoneStatus:
    label: ClassVar[StatusLabel] = StatusLabel.NONE

    def to_dict(self) -> Dict[str, Any]:
        return {"label": self.label.value}


ProblemStatus = Union[SuccessStatus, FailedStatus, WarningStatus, NoneStatus]
