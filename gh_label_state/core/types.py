# gh_label_state/core/types.py

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NamedTuple, TypeAlias

StateMap: TypeAlias = dict[str, str]

_UNSET: Any = object()


@dataclass(frozen=True)
class Label:
    """A label as attached to an issue; identity is the name"""
    name: str
    color: str | None = None
    description: str | None = None

    @classmethod
    def from_github(cls, label) -> "Label":
        """Build from a github.Label.Label (or anything with a name)"""
        return cls(
            name=label.name,
            color=getattr(label, 'color', None),
            description=getattr(label, 'description', None)
        )


class ParsedLabel(NamedTuple):
    """A decoded state label"""
    key: str
    value: str


class Operation(str, Enum):
    """The closed set of supported state operations"""
    GET = "get"
    GET_ALL = "get-all"
    SET = "set"
    REMOVE = "remove"

    @property
    def requires_key(self) -> bool:
        return self is not Operation.GET_ALL

    @property
    def requires_value(self) -> bool:
        return self is Operation.SET

    @classmethod
    def names(cls) -> list[str]:
        return [op.value for op in (cls.SET, cls.REMOVE, cls.GET, cls.GET_ALL)]


@dataclass(frozen=True)
class OperationContext:
    """Immutable configuration for a single invocation"""
    service: Any = field(repr=False)  # LabelService or compatible
    owner: str
    repo: str
    issue_number: int
    prefix: str
    separator: str
    delete_unused_labels: bool = False
    page_size: int = 100

    @property
    def repository(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass
class OperationResult:
    """Outcome of one operation

    `value` is left unset for operations that do not produce one, so that
    "no value" (get on a missing key) and "not applicable" stay distinct.
    """
    success: bool
    value: str | None = _UNSET
    state: str | None = None
    reason: str | None = None

    @property
    def has_value(self) -> bool:
        return self.value is not _UNSET

    @classmethod
    def failure(cls, reason: str) -> "OperationResult":
        return cls(success=False, reason=reason)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {
            "success": self.success,
            **({"value": self.value} if self.has_value else {}),
            **({"state": self.state} if self.state is not None else {}),
            **({"reason": self.reason} if self.reason is not None else {})
        }

    def to_outputs(self) -> dict[str, str]:
        """Render as GitHub Action output strings"""
        outputs = {"success": "true" if self.success else "false"}
        if self.has_value:
            outputs["value"] = self.value if self.value is not None else ""
        if self.state is not None:
            outputs["state"] = self.state
        return outputs
