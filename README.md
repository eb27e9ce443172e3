# epictracker

A small terminal tracker for epics and the stories that belong to them. All of
its data lives in a single JSON file.

## Installing

```
pip install .
```

## Running

```
epictracker
```

By default the program reads and writes `./data/db.json`. Use `--db` to pick
another file:

```
epictracker --db path/to/tracker.json
```

The file must exist before the first run; the program does not create it.
Start with an empty database:

```json
{ "last_item_id": 0, "epics": {}, "stories": {} }
```

## Using it

The screen is cleared and one page is shown at a time. Type a command and
press Enter.

- **Home page**: lists all epics by id. `q` quits, `c` creates an epic, and
  typing an epic's id opens it.
- **Epic page**: shows the epic and its stories. `p` goes back, `u` changes
  the epic's status, `d` deletes the epic together with all its stories, `c`
  creates a story in it, and typing a story's id opens it.
- **Story page**: `p` goes back, `u` changes the story's status, `d` deletes
  the story.

Any other input is ignored. The program also stops when standard input ends.

A status is one of OPEN, IN PROGRESS, RESOLVED and CLOSED. When asked for a new
status, enter 1 to 4 in that order; any other answer leaves the status as it
is. Deleting something asks for confirmation, and only an answer of `Y` goes
ahead. New items get ids counting up from 1, shared between epics and stories.

If the file cannot be read or written, or an item is missing, the error is
shown with "Press any key to continue..." and the program waits for Enter.

## Using it from Python

```python
from epictracker.db import JiraDatabase, MemoryDatabase
from epictracker.models import Epic, Story, Status

db = JiraDatabase(MemoryDatabase())
epic_id = db.create_epic(Epic("Launch", "Ship the first release"))
story_id = db.create_story(Story("Docs", "Write the manual"), epic_id)
db.update_story_status(story_id, Status.IN_PROGRESS)
print(db.read_db().stories[story_id].status)  # IN PROGRESS
```

- `JiraDatabase.from_path(path)` works on a JSON file through
  `JSONFileDatabase`; `MemoryDatabase` keeps the state in memory.
- `JiraDatabase` offers `read_db`, `create_epic`, `create_story`,
  `delete_epic`, `delete_story`, `update_epic_status` and
  `update_story_status`.
- Operations on an epic or story that does not exist raise `NotFoundError`, a
  subclass of `DatabaseError`, which is also raised when the file cannot be
  read, parsed or written.
- `epictracker.navigator.Navigator` holds the page stack and carries out the
  actions from `epictracker.models`; its `prompts` (an
  `epictracker.prompts.Prompts`) can be replaced to answer questions without a
  terminal. `epictracker.cli.run(navigator)` drives the interactive loop.