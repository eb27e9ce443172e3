"""Reading user input from standard input."""

import sys


def get_user_input() -> str:
    """Read one line from standard input, trailing newline included."""
    return sys.stdin.readline()


def wait_for_key_press() -> None:
    """Block until the user enters a line."""
    sys.stdin.readline()