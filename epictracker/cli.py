"""The interactive terminal loop."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from epictracker.db import DatabaseError, JiraDatabase
from epictracker.io_utils import get_user_input, wait_for_key_press
from epictracker.navigator import Navigator

DEFAULT_DB_PATH = "./data/db.json"


def clear_screen() -> None:
    """Clear the terminal and move the cursor to the top left corner."""
    sys.stdout.write("\x1b[2J\x1b[H")
    sys.stdout.flush()


def _report(context: str, error: Exception) -> None:
    print(f"{context}: {error}\nPress any key to continue...")
    wait_for_key_press()


def run(navigator: Navigator) -> None:
    """Draw pages and handle input until the page stack is empty or input ends."""
    while (page := navigator.current_page) is not None:
        clear_screen()
        try:
            page.draw_page()
        except DatabaseError as exc:
            _report("Error rendering page", exc)

        raw = get_user_input()
        if raw == "":
            break

        try:
            action = page.handle_input(raw.strip())
        except DatabaseError as exc:
            _report("Error getting user input", exc)
            continue

        if action is not None:
            try:
                navigator.handle_action(action)
            except DatabaseError as exc:
                _report("Error handling processing user input", exc)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the interactive tracker on a JSON database file."""
    parser = argparse.ArgumentParser(description="Track epics and stories in a terminal.")
    parser.add_argument(
        "--db",
        default=DEFAULT_DB_PATH,
        help=f"path of the JSON database file (default: {DEFAULT_DB_PATH})",
    )
    args = parser.parse_args(argv)
    run(Navigator(JiraDatabase.from_path(args.db)))
    return 0


if __name__ == "__main__":
    sys.exit(main())