from __future__ import annotations

import curses
from typing import TYPE_CHECKING

from recent_cd.constants import KEY_CR, KEY_CTRL_C, KEY_ESC, KEY_LF
from recent_cd.picker import HEADER_LINES, Picker, PickerInput

if TYPE_CHECKING:
    from recent_cd.config import UIConfig


KEYMAP = {
    curses.KEY_UP: PickerInput.MOVE_UP,
    curses.KEY_DOWN: PickerInput.MOVE_DOWN,
    curses.KEY_HOME: PickerInput.MOVE_FIRST,
    curses.KEY_END: PickerInput.MOVE_LAST,
    curses.KEY_ENTER: PickerInput.CONFIRM,
    KEY_LF: PickerInput.CONFIRM,
    KEY_CR: PickerInput.CONFIRM,
    ord("q"): PickerInput.QUIT,
    KEY_ESC: PickerInput.QUIT,
    KEY_CTRL_C: PickerInput.QUIT,
}

VI_KEYMAP = {
    ord("k"): PickerInput.MOVE_UP,
    ord("j"): PickerInput.MOVE_DOWN,
    ord("g"): PickerInput.MOVE_FIRST,
    ord("G"): PickerInput.MOVE_LAST,
}


def translate_key(ch: int, vi_keys: bool = True) -> PickerInput | None:
    """Map a curses key code to a picker event, or None if unbound."""
    if ch in KEYMAP:
        return KEYMAP[ch]
    if vi_keys:
        return VI_KEYMAP.get(ch)
    return None


def visible_window(total: int, cursor_line: int, height: int, offset: int) -> int:
    """Return the first line to draw so that `cursor_line` stays on screen."""
    if total <= height:
        return 0
    if cursor_line < offset:
        offset = cursor_line
    elif cursor_line >= offset + height:
        offset = cursor_line - height + 1
    return max(0, min(offset, total - height))


class PickerUI:
    def __init__(self, stdscr, picker: Picker, ui_config: "UIConfig | None" = None):
        self.stdscr = stdscr
        self.picker = picker
        self.title = ui_config.title if ui_config else None
        self.footer = ui_config.footer if ui_config else None
        self.vi_keys = ui_config.vi_keys if ui_config else True
        highlight = ui_config.highlight if ui_config else "reverse"
        self.highlight_attr = curses.A_BOLD if highlight == "bold" else curses.A_REVERSE
        self._offset = 0

        try:
            curses.curs_set(0)
            # Esc should quit immediately, not after the default 1s delay
            curses.set_escdelay(25)
        except curses.error:
            pass
        self.stdscr.keypad(True)

    def _lines(self) -> list[str]:
        kwargs = {}
        if self.title is not None:
            kwargs["title"] = self.title
        if self.footer is not None:
            kwargs["footer"] = self.footer
        return self.picker.render(**kwargs)

    def draw(self):
        lines = self._lines()
        h, w = self.stdscr.getmaxyx()
        cursor_line = HEADER_LINES + self.picker.cursor
        self._offset = visible_window(len(lines), cursor_line, h, self._offset)

        self.stdscr.erase()
        for row, line in enumerate(lines[self._offset:self._offset + h]):
            attr = 0
            if self.picker.candidates and self._offset + row == cursor_line:
                attr = self.highlight_attr
            try:
                self.stdscr.addnstr(row, 0, line, w - 1, attr)
            except curses.error:
                pass
        self.stdscr.refresh()

    def handle_key(self, ch: int):
        if ch == curses.KEY_RESIZE:
            return
        self.picker.handle(translate_key(ch, self.vi_keys))

    def run(self) -> str | None:
        try:
            while not self.picker.done:
                self.draw()
                self.handle_key(self.stdscr.getch())
        except KeyboardInterrupt:
            self.picker.handle(PickerInput.QUIT)
        return self.picker.result


def run_picker(stdscr, candidates: list[str], ui_config: "UIConfig | None" = None) -> str | None:
    """curses.wrapper target: show the picker and return the chosen path."""
    return PickerUI(stdscr, Picker(candidates), ui_config).run()
