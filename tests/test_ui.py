"""Tests for the curses picker front end, using a fake screen."""

from __future__ import annotations

import curses

import pytest

from recent_cd.config import UIConfig
from recent_cd.picker import Picker, PickerInput
from recent_cd.ui import PickerUI, run_picker, translate_key, visible_window


class FakeScreen:
    """Minimal stand-in for a curses window."""

    def __init__(self, keys, height=24, width=80):
        self._keys = list(keys)
        self.height = height
        self.width = width
        self.rows = {}
        self.refreshes = 0

    def getmaxyx(self):
        return (self.height, self.width)

    def keypad(self, flag):
        pass

    def erase(self):
        self.rows = {}

    def addnstr(self, y, x, text, n, attr=0):
        self.rows[y] = (text[:n], attr)

    def refresh(self):
        self.refreshes += 1

    def getch(self):
        key = self._keys.pop(0)
        if isinstance(key, BaseException):
            raise key
        return key


@pytest.fixture(autouse=True)
def no_terminal(monkeypatch):
    monkeypatch.setattr(curses, "curs_set", lambda visibility: None)
    monkeypatch.setattr(curses, "set_escdelay", lambda ms: None)


PATHS = ["/a", "/b", "/c"]


class TestTranslateKey:
    def test_arrows(self):
        assert translate_key(curses.KEY_UP) == PickerInput.MOVE_UP
        assert translate_key(curses.KEY_DOWN) == PickerInput.MOVE_DOWN

    def test_enter_variants(self):
        for ch in (curses.KEY_ENTER, 10, 13):
            assert translate_key(ch) == PickerInput.CONFIRM

    def test_quit_keys(self):
        for ch in (ord("q"), 27, 3):
            assert translate_key(ch) == PickerInput.QUIT

    def test_vi_keys(self):
        assert translate_key(ord("k")) == PickerInput.MOVE_UP
        assert translate_key(ord("j")) == PickerInput.MOVE_DOWN
        assert translate_key(ord("G")) == PickerInput.MOVE_LAST

    def test_vi_keys_disabled(self):
        assert translate_key(ord("j"), vi_keys=False) is None
        assert translate_key(curses.KEY_DOWN, vi_keys=False) == PickerInput.MOVE_DOWN

    def test_unbound(self):
        assert translate_key(ord("x")) is None
        assert translate_key(-1) is None


class TestVisibleWindow:
    def test_fits(self):
        assert visible_window(10, 9, 20, 0) == 0

    def test_scrolls_down_to_cursor(self):
        assert visible_window(50, 30, 10, 0) == 21

    def test_scrolls_up_to_cursor(self):
        assert visible_window(50, 5, 10, 20) == 5

    def test_keeps_offset_when_visible(self):
        assert visible_window(50, 25, 10, 20) == 20


class TestPickerUI:
    def test_navigate_and_confirm(self):
        scr = FakeScreen([curses.KEY_DOWN, ord("j"), 10])
        assert run_picker(scr, PATHS) == "/c"

    def test_quit(self):
        scr = FakeScreen([curses.KEY_DOWN, ord("q")])
        assert run_picker(scr, PATHS) is None

    def test_ctrl_c_quits(self):
        scr = FakeScreen([curses.KEY_DOWN, KeyboardInterrupt()])
        assert run_picker(scr, PATHS) is None

    def test_ignores_resize_and_unbound_keys(self):
        scr = FakeScreen([curses.KEY_RESIZE, ord("x"), -1, 10])
        assert run_picker(scr, PATHS) == "/a"

    def test_draw_highlights_cursor_row(self):
        scr = FakeScreen([])
        ui = PickerUI(scr, Picker(PATHS))
        ui.picker.handle(PickerInput.MOVE_DOWN)
        ui.draw()
        text, attr = scr.rows[3]
        assert text == "> /b"
        assert attr == curses.A_REVERSE
        assert scr.rows[2][1] == 0

    def test_bold_highlight(self):
        scr = FakeScreen([])
        ui = PickerUI(scr, Picker(PATHS), UIConfig(highlight="bold"))
        ui.draw()
        assert scr.rows[2] == ("> /a", curses.A_BOLD)

    def test_custom_title(self):
        scr = FakeScreen([])
        ui = PickerUI(scr, Picker(PATHS), UIConfig(title="Where to?"))
        ui.draw()
        assert scr.rows[0][0] == "Where to?"

    def test_lines_clipped_to_width(self):
        scr = FakeScreen([], width=10)
        ui = PickerUI(scr, Picker(["/a/very/long/path/indeed"]))
        ui.draw()
        assert all(len(text) <= 9 for text, _ in scr.rows.values())

    def test_long_list_scrolls_with_cursor(self):
        paths = [f"/d{i}" for i in range(40)]
        scr = FakeScreen([], height=10)
        ui = PickerUI(scr, Picker(paths))
        ui.picker.handle(PickerInput.MOVE_LAST)
        ui.draw()
        assert ("> /d39", curses.A_REVERSE) in scr.rows.values()

    def test_empty_list_only_quits(self):
        scr = FakeScreen([10, curses.KEY_DOWN, ord("q")])
        assert run_picker(scr, []) is None
        assert scr.refreshes == 3
