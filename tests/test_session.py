import curses

import pytest

from javelin import storage
from javelin.editor import env_current_file
from javelin.session import KeyEvent, Session
from javelin.tui import decode_key


def press(code, **kw):
    return KeyEvent(code, **kw)


@pytest.fixture
def make_session(make_controller):
    def _make(files=(), current=None):
        return Session(make_controller(files), lambda: current)

    return _make


@pytest.mark.parametrize(
    "event", [press("esc"), press("q"), press("c", ctrl=True), press("C", ctrl=True)]
)
def test_quit_keys(make_session, event):
    s = make_session(["/a"])
    s.handle(event)
    assert not s.running
    assert s.launch_target is None


def test_terminated_is_absorbing(make_session):
    s = make_session(["/a", "/b"])
    s.handle(press("q"))
    s.handle(press("j"))
    s.handle(press("enter"))
    assert s.controller.cursor == 0
    assert s.launch_target is None


def test_non_press_events_ignored(make_session):
    s = make_session(["/a", "/b"])
    s.handle(KeyEvent("j", kind="release"))
    s.handle(KeyEvent("q", kind="repeat"))
    assert s.running
    assert s.controller.cursor == 0


def test_navigation(make_session):
    s = make_session(["/a", "/b", "/c"])
    s.handle(press("j"))
    assert s.controller.cursor == 1
    s.handle(press("k"))
    s.handle(press("k"))
    assert s.controller.cursor == 2


def test_add_uses_current_file(make_session):
    s = make_session(current="/work/x.py")
    s.handle(press("a"))
    assert s.controller.files == ["/work/x.py"]
    assert s.controller.cursor == 0
    assert s.message == "Added: /work/x.py"


def test_add_without_current_file_is_noop(make_session):
    s = make_session(["/a"])
    s.handle(press("a"))
    assert s.controller.files == ["/a"]


def test_add_with_env_provider(make_controller):
    provider = env_current_file("ZED_FILE", {"ZED_FILE": "/p/q.py"})
    s = Session(make_controller(), provider)
    s.handle(press("a"))
    assert s.controller.files == ["/p/q.py"]


def test_env_provider_absent_or_empty():
    assert env_current_file("ZED_FILE", {})() is None
    assert env_current_file("ZED_FILE", {"ZED_FILE": ""})() is None


def test_delete(make_session):
    s = make_session(["/a", "/b"])
    s.handle(press("d"))
    assert s.controller.files == ["/b"]
    assert s.message == "Deleted: /a"


def test_shift_reorder_scenario(make_session):
    s = make_session(["/a", "/b", "/c"])
    s.controller.select_index(2)
    s.handle(press("K", shift=True))
    s.handle(press("K", shift=True))
    assert s.controller.files == ["/c", "/a", "/b"]
    assert s.controller.cursor == 0
    s.handle(press("J", shift=True))
    assert s.controller.files == ["/a", "/c", "/b"]
    assert s.controller.cursor == 1


def test_uppercase_without_shift_flag_is_ignored(make_session):
    s = make_session(["/a", "/b"])
    s.handle(press("J"))
    assert s.controller.files == ["/a", "/b"]


def test_enter_launches_selection(make_session):
    s = make_session(["/a", "/b"])
    s.handle(press("j"))
    s.handle(press("enter"))
    assert s.launch_target == "/b"
    assert not s.running


def test_enter_on_empty_list_keeps_running(make_session):
    s = make_session()
    s.handle(press("enter"))
    assert s.running
    assert s.launch_target is None


def test_digit_launches_entry(make_session):
    s = make_session(["/a", "/b", "/c"])
    s.handle(press("3"))
    assert s.launch_target == "/c"
    assert s.controller.cursor == 2
    assert not s.running


@pytest.mark.parametrize("digit", ["0", "4", "9"])
def test_digit_out_of_range_is_noop(make_session, digit):
    s = make_session(["/a", "/b", "/c"])
    s.handle(press(digit))
    assert s.running
    assert s.launch_target is None


def test_unknown_keys_are_noop(make_session):
    s = make_session(["/a"])
    for event in (press("x"), press("resize"), press("other")):
        s.handle(event)
    assert s.running
    assert s.controller.files == ["/a"]


def test_decode_key():
    assert decode_key(27) == KeyEvent("esc")
    assert decode_key(3) == KeyEvent("c", ctrl=True)
    assert decode_key(10) == KeyEvent("enter")
    assert decode_key(curses.KEY_ENTER) == KeyEvent("enter")
    assert decode_key(curses.KEY_RESIZE) == KeyEvent("resize")
    assert decode_key(ord("j")) == KeyEvent("j")
    assert decode_key(ord("K")) == KeyEvent("K", shift=True)
    assert decode_key(ord("5")) == KeyEvent("5")
    assert decode_key(curses.KEY_UP) == KeyEvent("other")


def test_write_failure_keeps_session_running(make_session, monkeypatch):
    s = make_session(["/a"], current="/b")

    def fail(*args, **kwargs):
        raise OSError(13, "Permission denied")

    monkeypatch.setattr(storage.os, "replace", fail)
    s.handle(press("a"))
    assert s.running
    assert "Cannot write store" in s.message
    assert "/b" in s.controller.files
    s.handle(press("q"))
    assert not s.running
