"""The stack of pages the user moves through, and the handling of their actions."""

from __future__ import annotations

from typing import Optional

from epictracker.db import DatabaseError, JiraDatabase
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
from epictracker.pages import EpicDetail, HomePage, Page, StoryDetail
from epictracker.prompts import Prompts


class Navigator:
    """Keeps the page stack and carries out the actions pages return."""

    def __init__(self, db: JiraDatabase, prompts: Optional[Prompts] = None) -> None:
        self.db = db
        self.prompts = prompts if prompts is not None else Prompts()
        self._pages: list[Page] = [HomePage(db)]

    @property
    def current_page(self) -> Optional[Page]:
        """The page on top of the stack, or None once the stack is empty."""
        return self._pages[-1] if self._pages else None

    @property
    def page_count(self) -> int:
        """How many pages are on the stack."""
        return len(self._pages)

    def _pop_page(self) -> None:
        if self._pages:
            self._pages.pop()

    def handle_action(self, action: Action) -> None:
        """Carry out ``action``; raise DatabaseError if a change cannot be stored."""
        match action:
            case NavigateToEpicDetail(epic_id=epic_id):
                self._pages.append(EpicDetail(epic_id, self.db))
            case NavigateToStoryDetail(epic_id=epic_id, story_id=story_id):
                self._pages.append(StoryDetail(epic_id, story_id, self.db))
            case NavigateToPreviousPage():
                self._pop_page()
            case CreateEpic():
                epic = self.prompts.create_epic()
                try:
                    self.db.create_epic(epic)
                except DatabaseError as exc:
                    raise DatabaseError("failed to create epic!") from exc
            case UpdateEpicStatus(epic_id=epic_id):
                status = self.prompts.update_status()
                if status is not None:
                    try:
                        self.db.update_epic_status(epic_id, status)
                    except DatabaseError as exc:
                        raise DatabaseError("failed to update epic!") from exc
            case DeleteEpic(epic_id=epic_id):
                if self.prompts.delete_epic():
                    try:
                        self.db.delete_epic(epic_id)
                    except DatabaseError as exc:
                        raise DatabaseError("failed to delete epic!") from exc
                    self._pop_page()
            case CreateStory(epic_id=epic_id):
                story = self.prompts.create_story()
                try:
                    self.db.create_story(story, epic_id)
                except DatabaseError as exc:
                    raise DatabaseError("failed to create story!") from exc
            case UpdateStoryStatus(story_id=story_id):
                status = self.prompts.update_status()
                if status is not None:
                    try:
                        self.db.update_story_status(story_id, status)
                    except DatabaseError as exc:
                        raise DatabaseError("failed to update story!") from exc
            case DeleteStory(epic_id=epic_id, story_id=story_id):
                if self.prompts.delete_story():
                    try:
                        self.db.delete_story(epic_id, story_id)
                    except DatabaseError as exc:
                        raise DatabaseError("failed to delete story!") from exc
                    self._pop_page()
            case Exit():
                self._pages.clear()
            case _:
                raise TypeError(f"unknown action {action!r}")