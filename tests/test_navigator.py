import pytest

from epictracker.db import DatabaseError, JiraDatabase, MemoryDatabase
from epictracker.models import (
    CreateEpic,
    CreateStory,
    DeleteEpic,
    DeleteStory,
    Epic,
    Exit,
    NavigateToEpicDetail,
    NavigateToPreviousPage,
    NavigateToStoryDetail,
    Status,
    Story,
    UpdateEpicStatus,
    UpdateStoryStatus,
)
from epictracker.navigator import Navigator
from epictracker.pages import EpicDetail, HomePage, StoryDetail
from epictracker.prompts import Prompts


@pytest.fixture
def db():
    return JiraDatabase(MemoryDatabase())


def test_should_start_on_home_page(db):
    nav = Navigator(db)
    assert nav.page_count == 1
    assert isinstance(nav.current_page, HomePage)
    assert nav.current_page.db is db


def test_handle_action_should_navigate_pages(db):
    nav = Navigator(db)

    nav.handle_action(NavigateToEpicDetail(epic_id=1))
    assert nav.page_count == 2
    assert isinstance(nav.current_page, EpicDetail)
    assert nav.current_page.epic_id == 1

    nav.handle_action(NavigateToStoryDetail(epic_id=1, story_id=2))
    assert nav.page_count == 3
    assert isinstance(nav.current_page, StoryDetail)
    assert nav.current_page.story_id == 2

    nav.handle_action(NavigateToPreviousPage())
    assert nav.page_count == 2
    assert isinstance(nav.current_page, EpicDetail)

    nav.handle_action(NavigateToPreviousPage())
    assert nav.page_count == 1
    assert isinstance(nav.current_page, HomePage)

    nav.handle_action(NavigateToPreviousPage())
    assert nav.page_count == 0
    assert nav.current_page is None

    nav.handle_action(NavigateToPreviousPage())
    assert nav.page_count == 0


def test_handle_action_should_clear_pages_on_exit(db):
    nav = Navigator(db)
    nav.handle_action(NavigateToEpicDetail(epic_id=1))
    nav.handle_action(NavigateToStoryDetail(epic_id=1, story_id=2))
    nav.handle_action(Exit())
    assert nav.page_count == 0
    assert nav.current_page is None


def test_handle_action_should_handle_create_epic(db):
    prompts = Prompts(create_epic=lambda: Epic("name", "description"))
    nav = Navigator(db, prompts)

    nav.handle_action(CreateEpic())

    state = db.read_db()
    assert len(state.epics) == 1
    epic = next(iter(state.epics.values()))
    assert epic.name == "name"
    assert epic.description == "description"


def test_handle_action_should_handle_update_epic(db):
    epic_id = db.create_epic(Epic("", ""))
    nav = Navigator(db, Prompts(update_status=lambda: Status.IN_PROGRESS))

    nav.handle_action(UpdateEpicStatus(epic_id=epic_id))

    assert db.read_db().epics[epic_id].status == Status.IN_PROGRESS


def test_update_epic_with_no_status_changes_nothing(db):
    epic_id = db.create_epic(Epic("", ""))
    nav = Navigator(db, Prompts(update_status=lambda: None))

    nav.handle_action(UpdateEpicStatus(epic_id=epic_id))

    assert db.read_db().epics[epic_id].status == Status.OPEN


def test_handle_action_should_handle_delete_epic(db):
    epic_id = db.create_epic(Epic("", ""))
    nav = Navigator(db, Prompts(delete_epic=lambda: True))
    nav.handle_action(NavigateToEpicDetail(epic_id=epic_id))

    nav.handle_action(DeleteEpic(epic_id=epic_id))

    assert len(db.read_db().epics) == 0
    assert nav.page_count == 1


def test_declined_delete_epic_keeps_epic_and_page(db):
    epic_id = db.create_epic(Epic("", ""))
    nav = Navigator(db, Prompts(delete_epic=lambda: False))
    nav.handle_action(NavigateToEpicDetail(epic_id=epic_id))

    nav.handle_action(DeleteEpic(epic_id=epic_id))

    assert epic_id in db.read_db().epics
    assert nav.page_count == 2


def test_handle_action_should_handle_create_story(db):
    epic_id = db.create_epic(Epic("", ""))
    nav = Navigator(db, Prompts(create_story=lambda: Story("name", "description")))

    nav.handle_action(CreateStory(epic_id=epic_id))

    state = db.read_db()
    assert len(state.stories) == 1
    story = next(iter(state.stories.values()))
    assert story.name == "name"
    assert story.description == "description"


def test_handle_action_should_handle_update_story(db):
    epic_id = db.create_epic(Epic("", ""))
    story_id = db.create_story(Story("", ""), epic_id)
    nav = Navigator(db, Prompts(update_status=lambda: Status.IN_PROGRESS))

    nav.handle_action(UpdateStoryStatus(story_id=story_id))

    assert db.read_db().stories[story_id].status == Status.IN_PROGRESS


def test_handle_action_should_handle_delete_story(db):
    epic_id = db.create_epic(Epic("", ""))
    story_id = db.create_story(Story("", ""), epic_id)
    nav = Navigator(db, Prompts(delete_story=lambda: True))

    nav.handle_action(DeleteStory(epic_id=epic_id, story_id=story_id))

    assert len(db.read_db().stories) == 0


def test_create_story_for_missing_epic_raises(db):
    nav = Navigator(db, Prompts(create_story=lambda: Story("", "")))
    with pytest.raises(DatabaseError, match="failed to create story!"):
        nav.handle_action(CreateStory(epic_id=999))


def test_delete_missing_epic_raises_and_keeps_page(db):
    nav = Navigator(db, Prompts(delete_epic=lambda: True))
    with pytest.raises(DatabaseError, match="failed to delete epic!"):
        nav.handle_action(DeleteEpic(epic_id=999))
    assert nav.page_count == 1


def test_update_missing_story_raises(db):
    nav = Navigator(db, Prompts(update_status=lambda: Status.CLOSED))
    with pytest.raises(DatabaseError, match="failed to update story!"):
        nav.handle_action(UpdateStoryStatus(story_id=999))