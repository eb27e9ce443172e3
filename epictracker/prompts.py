"""Interactive prompts that ask the user for new items, confirmations and statuses."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional

from epictracker.io_utils import get_user_input
from epictracker.models import Epic, Status, Story

_SEPARATOR = "----------------------------"

_STATUS_CHOICES = {
    1: Status.OPEN,
    2: Status.IN_PROGRESS,
    3: Status.RESOLVED,
    4: Status.CLOSED,
}

_SMALL_NUMBER = re.compile(r"\+?[0-9]+")


def create_epic_prompt() -> Epic:
    """Ask for the name and description of a new epic."""
    print(_SEPARATOR)
    print("Epic Name: ")
    name = get_user_input()
    print("Epic Description: ")
    description = get_user_input()
    return Epic(name.strip(), description.strip())


def create_story_prompt() -> Story:
    """Ask for the name and description of a new story."""
    print(_SEPARATOR)
    print("Story Name: ")
    name = get_user_input()
    print("Story Description: ")
    description = get_user_input()
    return Story(name.strip(), description.strip())


def delete_epic_prompt() -> bool:
    """Ask whether an epic and all of its stories should be deleted."""
    print(_SEPARATOR)
    print(
        "Are you sure you want to delete this epic? "
        "All stories in this epic will also be deleted [Y/n]: "
    )
    return get_user_input().strip() == "Y"


def delete_story_prompt() -> bool:
    """Ask whether a story should be deleted."""
    print(_SEPARATOR)
    print("Are you sure you want to delete this story? [Y/n]: ")
    return get_user_input().strip() == "Y"


def update_status_prompt() -> Optional[Status]:
    """Ask for a new status; return None when the answer is not a valid choice."""
    print(_SEPARATOR)
    print("New Status (1 - OPEN, 2 - IN-PROGRESS, 3 - RESOLVED, 4 - CLOSED): ")
    answer = get_user_input().strip()
    if not _SMALL_NUMBER.fullmatch(answer):
        return None
    value = int(answer)
    if value > 255:
        return None
    return _STATUS_CHOICES.get(value)


@dataclass
class Prompts:
    """The set of prompts the navigator uses; each one can be replaced."""

    create_epic: Callable[[], Epic] = create_epic_prompt
    create_story: Callable[[], Story] = create_story_prompt
    delete_epic: Callable[[], bool] = delete_epic_prompt
    delete_story: Callable[[], bool] = delete_story_prompt
    update_status: Callable[[], Optional[Status]] = update_status_prompt