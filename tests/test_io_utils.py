import io

from epictracker.io_utils import get_user_input, wait_for_key_press


def test_get_user_input_returns_line_with_newline(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("hello\nworld\n"))
    assert get_user_input() == "hello\n"
    assert get_user_input() == "world\n"


def test_get_user_input_at_end_of_input_is_empty(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert get_user_input() == ""


def test_wait_for_key_press_consumes_one_line(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("\nnext\n"))
    wait_for_key_press()
    assert get_user_input() == "next\n"