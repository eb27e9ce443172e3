"""Storage back ends and the operations on epics and stories."""

from __future__ import annotations

import abc
import json
import os
from pathlib import Path

from epictracker.models import DBState, Epic, Status, Story


class DatabaseError(Exception):
    """Raised when the stored state cannot be read, written or changed."""


class NotFoundError(DatabaseError):
    """Raised when an epic or story that an operation needs does not exist."""


class Database(abc.ABC):
    """A place where the whole state document is kept."""

    @abc.abstractmethod
    def read_db(self) -> DBState:
        """Return the stored state."""

    @abc.abstractmethod
    def write_db(self, db_state: DBState) -> None:
        """Replace the stored state."""


class JSONFileDatabase(Database):
    """State kept as a JSON document in a file."""

    def __init__(self, file_path: str | os.PathLike[str]) -> None:
        self.file_path = Path(file_path)

    def read_db(self) -> DBState:
        try:
            content = self.file_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise DatabaseError(f"cannot read {self.file_path}: {exc}") from exc
        try:
            return DBState.from_dict(json.loads(content))
        except ValueError as exc:
            raise DatabaseError(f"invalid database file {self.file_path}: {exc}") from exc

    def write_db(self, db_state: DBState) -> None:
        payload = json.dumps(db_state.to_dict(), separators=(",", ":"))
        try:
            self.file_path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            raise DatabaseError(f"cannot write {self.file_path}: {exc}") from exc


class MemoryDatabase(Database):
    """State kept in memory; every read and write works on a copy."""

    def __init__(self) -> None:
        self._state = DBState()

    def read_db(self) -> DBState:
        return self._state.copy()

    def write_db(self, db_state: DBState) -> None:
        self._state = db_state.copy()


class JiraDatabase:
    """Operations on epics and stories over a storage back end."""

    def __init__(self, database: Database) -> None:
        self.database = database

    @classmethod
    def from_path(cls, file_path: str | os.PathLike[str]) -> JiraDatabase:
        return cls(JSONFileDatabase(file_path))

    def read_db(self) -> DBState:
        return self.database.read_db()

    def create_epic(self, epic: Epic) -> int:
        state = self.database.read_db()
        new_id = state.last_item_id + 1
        state.last_item_id = new_id
        state.epics[new_id] = epic
        self.database.write_db(state)
        return new_id

    def create_story(self, story: Story, epic_id: int) -> int:
        state = self.database.read_db()
        epic = _get_epic(state, epic_id)
        new_id = state.last_item_id + 1
        state.last_item_id = new_id
        state.stories[new_id] = story
        epic.stories.append(new_id)
        self.database.write_db(state)
        return new_id

    def delete_epic(self, epic_id: int) -> None:
        state = self.database.read_db()
        epic = _get_epic(state, epic_id)
        for story_id in epic.stories:
            state.stories.pop(story_id, None)
        del state.epics[epic_id]
        self.database.write_db(state)

    def delete_story(self, epic_id: int, story_id: int) -> None:
        state = self.database.read_db()
        epic = _get_epic(state, epic_id)
        try:
            epic.stories.remove(story_id)
        except ValueError:
            raise NotFoundError("story id not found in epic stories vector") from None
        state.stories.pop(story_id, None)
        self.database.write_db(state)

    def update_epic_status(self, epic_id: int, status: Status) -> None:
        state = self.database.read_db()
        _get_epic(state, epic_id).status = status
        self.database.write_db(state)

    def update_story_status(self, story_id: int, status: Status) -> None:
        state = self.database.read_db()
        try:
            story = state.stories[story_id]
        except KeyError:
            raise NotFoundError("could not find story in database!") from None
        story.status = status
        self.database.write_db(state)


def _get_epic(state: DBState, epic_id: int) -> Epic:
    try:
        return state.epics[epic_id]
    except KeyError:
        raise NotFoundError("could not find epic in database!") from None