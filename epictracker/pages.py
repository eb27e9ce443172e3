"""Pages of the text interface: the epic list, an epic's detail and a story's detail."""

from __future__ import annotations

import abc
import re
from dataclasses import dataclass
from typing import Optional

from epictracker.db import DatabaseError, JiraDatabase, NotFoundError
from epictracker.models import (
    Action,
    CreateEpic,
    CreateStory,
    DeleteEpic,
    DeleteStory,
    Exit,
    NavigateToEpicDetail,
    NavigateToPreviousPage,
    NavigateToStoryDetail,
    UpdateEpicStatus,
    UpdateStoryStatus,
)
from epictracker.page_helpers import get_column_string

_ID_PATTERN = re.compile(r"\+?[0-9]+")
_MAX_ID = 2**32 - 1

_LIST_HEADER = "     id     |               name               |      status      "
_DETAIL_HEADER = "  id  |     name     |         description         |    status    "


def _parse_id(text: str) -> Optional[int]:
    if not _ID_PATTERN.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _MAX_ID else None


def _list_row(item_id: int, name: str, status: object) -> str:
    return " | ".join(
        (
            get_column_string(str(item_id), 11),
            get_column_string(name, 32),
            get_column_string(str(status), 17),
        )
    )


def _detail_row(item_id: int, name: str, description: str, status: object) -> str:
    return " | ".join(
        (
            get_column_string(str(item_id), 5),
            get_column_string(name, 12),
            get_column_string(description, 27),
            get_column_string(str(status), 13),
        )
    )


class Page(abc.ABC):
    """A screen that can draw itself and turn user input into an action."""

    @abc.abstractmethod
    def draw_page(self) -> None:
        """Print the page to standard output."""

    @abc.abstractmethod
    def handle_input(self, user_input: str) -> Optional[Action]:
        """Return the action the input asks for, or None if it asks for nothing."""


@dataclass
class HomePage(Page):
    """The list of all epics."""

    db: JiraDatabase

    def draw_page(self) -> None:
        epics = self.db.read_db().epics
        print("----------------------------- EPICS -----------------------------")
        print(_LIST_HEADER)
        for epic_id in sorted(epics):
            epic = epics[epic_id]
            print(_list_row(epic_id, epic.name, epic.status))
        print()
        print()
        print("[q] quit | [c] create epic | [:id:] navigate to epic")

    def handle_input(self, user_input: str) -> Optional[Action]:
        epics = self.db.read_db().epics
        if user_input == "q":
            return Exit()
        if user_input == "c":
            return CreateEpic()
        epic_id = _parse_id(user_input)
        if epic_id is not None and epic_id in epics:
            return NavigateToEpicDetail(epic_id=epic_id)
        return None


@dataclass
class EpicDetail(Page):
    """One epic with the list of its stories."""

    epic_id: int
    db: JiraDatabase

    def draw_page(self) -> None:
        state = self.db.read_db()
        epic = state.epics.get(self.epic_id)
        if epic is None:
            raise NotFoundError("could not find epic!")

        print("------------------------------ EPIC ------------------------------")
        print(_DETAIL_HEADER)
        print(_detail_row(self.epic_id, epic.name, epic.description, epic.status))
        print()
        print("---------------------------- STORIES ----------------------------")
        print(_LIST_HEADER)
        for story_id in sorted(epic.stories):
            try:
                story = state.stories[story_id]
            except KeyError:
                raise DatabaseError(f"epic refers to missing story {story_id}") from None
            print(_list_row(story_id, story.name, story.status))
        print()
        print()
        print(
            "[p] previous | [u] update epic | [d] delete epic | "
            "[c] create story | [:id:] navigate to story"
        )

    def handle_input(self, user_input: str) -> Optional[Action]:
        stories = self.db.read_db().stories
        if user_input == "p":
            return NavigateToPreviousPage()
        if user_input == "u":
            return UpdateEpicStatus(epic_id=self.epic_id)
        if user_input == "d":
            return DeleteEpic(epic_id=self.epic_id)
        if user_input == "c":
            return CreateStory(epic_id=self.epic_id)
        story_id = _parse_id(user_input)
        if story_id is not None and story_id in stories:
            return NavigateToStoryDetail(epic_id=self.epic_id, story_id=story_id)
        return None


@dataclass
class StoryDetail(Page):
    """One story."""

    epic_id: int
    story_id: int
    db: JiraDatabase

    def draw_page(self) -> None:
        state = self.db.read_db()
        story = state.stories.get(self.story_id)
        if story is None:
            raise NotFoundError("could not find story!")

        print("------------------------------ STORY ------------------------------")
        print(_DETAIL_HEADER)
        print(_detail_row(self.story_id, story.name, story.description, story.status))
        print()
        print()
        print("[p] previous | [u] update story | [d] delete story")

    def handle_input(self, user_input: str) -> Optional[Action]:
        if user_input == "p":
            return NavigateToPreviousPage()
        if user_input == "u":
            return UpdateStoryStatus(story_id=self.story_id)
        if user_input == "d":
            return DeleteStory(epic_id=self.epic_id, story_id=self.story_id)
        return None