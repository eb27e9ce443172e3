"""Data model: statuses, epics, stories, the stored state and UI actions."""

from __future__ import annotations

import enum
from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any


class Status(enum.Enum):
    """Workflow status of an epic or a story.

    The enum value is the name used in the stored JSON document.
    """

    OPEN = "Open"
    IN_PROGRESS = "InProgress"
    RESOLVED = "Resolved"
    CLOSED = "Closed"

    def __str__(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    Status.OPEN: "OPEN",
    Status.IN_PROGRESS: "IN PROGRESS",
    Status.RESOLVED: "RESOLVED",
    Status.CLOSED: "CLOSED",
}


def _require(data: Any, key: str, kind: type) -> Any:
    if not isinstance(data, dict):
        raise ValueError(f"expected an object, got {type(data).__name__}")
    try:
        value = data[key]
    except KeyError:
        raise ValueError(f"missing field {key!r}") from None
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ValueError(f"field {key!r} must be of type {kind.__name__}")
    return value


def _parse_id(raw: str) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"invalid id {raw!r}") from None
    if value < 0:
        raise ValueError(f"invalid id {raw!r}")
    return value


def _parse_status(raw: Any) -> Status:
    try:
        return Status(raw)
    except ValueError:
        raise ValueError(f"unknown status {raw!r}") from None


@dataclass
class Epic:
    """A large piece of work grouping several stories."""

    name: str
    description: str
    status: Status = Status.OPEN
    stories: list[int] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "status": self.status.value,
            "stories": list(self.stories),
        }

    @classmethod
    def from_dict(cls, data: Any) -> Epic:
        stories = _require(data, "stories", list)
        for story_id in stories:
            if not isinstance(story_id, int) or isinstance(story_id, bool) or story_id < 0:
                raise ValueError(f"invalid story id {story_id!r}")
        return cls(
            name=_require(data, "name", str),
            description=_require(data, "description", str),
            status=_parse_status(_require(data, "status", str)),
            stories=list(stories),
        )


@dataclass
class Story:
    """A single unit of work belonging to an epic."""

    name: str
    description: str
    status: Status = Status.OPEN

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Story:
        return cls(
            name=_require(data, "name", str),
            description=_require(data, "description", str),
            status=_parse_status(_require(data, "status", str)),
        )


@dataclass
class DBState:
    """The whole stored document: every epic and story, plus the id counter."""

    last_item_id: int = 0
    epics: dict[int, Epic] = field(default_factory=dict)
    stories: dict[int, Story] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "last_item_id": self.last_item_id,
            "epics": {str(k): self.epics[k].to_dict() for k in sorted(self.epics)},
            "stories": {str(k): self.stories[k].to_dict() for k in sorted(self.stories)},
        }

    @classmethod
    def from_dict(cls, data: Any) -> DBState:
        last_item_id = _require(data, "last_item_id", int)
        if last_item_id < 0:
            raise ValueError("last_item_id must not be negative")
        epics = _require(data, "epics", dict)
        stories = _require(data, "stories", dict)
        return cls(
            last_item_id=last_item_id,
            epics={_parse_id(k): Epic.from_dict(v) for k, v in epics.items()},
            stories={_parse_id(k): Story.from_dict(v) for k, v in stories.items()},
        )

    def copy(self) -> DBState:
        return deepcopy(self)


class Action:
    """Base class of everything a page can ask the navigator to do."""

    __slots__ = ()


@dataclass(frozen=True)
class NavigateToEpicDetail(Action):
    epic_id: int


@dataclass(frozen=True)
class NavigateToStoryDetail(Action):
    epic_id: int
    story_id: int


@dataclass(frozen=True)
class NavigateToPreviousPage(Action):
    pass


@dataclass(frozen=True)
class CreateEpic(Action):
    pass


@dataclass(frozen=True)
class UpdateEpicStatus(Action):
    epic_id: int


@dataclass(frozen=True)
class DeleteEpic(Action):
    epic_id: int


@dataclass(frozen=True)
class CreateStory(Action):
    epic_id: int


@dataclass(frozen=True)
class UpdateStoryStatus(Action):
    story_id: int


@dataclass(frozen=True)
class DeleteStory(Action):
    epic_id: int
    story_id: int


@dataclass(frozen=True)
class Exit(Action):
    pass