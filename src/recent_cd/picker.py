"""UI-agnostic single-selection picker: state machine and renderer.

No curses imports: the curses front end in ``recent_cd.ui`` translates keys
into ``PickerInput`` events and draws whatever ``render_view`` returns, so
everything here can be tested without a terminal.
"""

from __future__ import annotations

from enum import Enum, auto

from recent_cd.constants import CURSOR_MARKER, DEFAULT_FOOTER, DEFAULT_TITLE, EMPTY_LIST_TEXT


class PickerState(Enum):
    ACTIVE = auto()
    CONFIRMED = auto()
    CANCELLED = auto()


class PickerInput(Enum):
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_FIRST = auto()
    MOVE_LAST = auto()
    CONFIRM = auto()
    QUIT = auto()


# Number of lines render_view puts above the first candidate
HEADER_LINES = 2


class Picker:
    def __init__(self, candidates: list[str]):
        self.candidates: tuple[str, ...] = tuple(candidates)
        self.state: PickerState = PickerState.ACTIVE
        self.cursor: int = 0
        self.result: str | None = None

    @property
    def done(self) -> bool:
        return self.state != PickerState.ACTIVE

    @property
    def last_index(self) -> int:
        return len(self.candidates) - 1

    # --- Public API ---

    def handle(self, event: PickerInput | None) -> PickerState:
        """Apply one input event and return the resulting state.

        Events arriving after a terminal state, and unknown events, are ignored.
        """
        if self.done:
            return self.state
        if event == PickerInput.MOVE_UP:
            self.move_up()
        elif event == PickerInput.MOVE_DOWN:
            self.move_down()
        elif event == PickerInput.MOVE_FIRST:
            self.move_first()
        elif event == PickerInput.MOVE_LAST:
            self.move_last()
        elif event == PickerInput.CONFIRM:
            self.confirm()
        elif event == PickerInput.QUIT:
            self.quit()
        return self.state

    def move_up(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1

    def move_down(self) -> None:
        if self.cursor < self.last_index:
            self.cursor += 1

    def move_first(self) -> None:
        self.cursor = 0

    def move_last(self) -> None:
        self.cursor = max(0, self.last_index)

    def confirm(self) -> None:
        # Nothing to pick from an empty list; only quit ends the session
        if not self.candidates:
            return
        self.result = self.candidates[self.cursor]
        self.state = PickerState.CONFIRMED

    def quit(self) -> None:
        self.result = None
        self.state = PickerState.CANCELLED

    def render(self, title: str = DEFAULT_TITLE, footer: str = DEFAULT_FOOTER) -> list[str]:
        return render_view(self.candidates, self.cursor, title=title, footer=footer)


def render_view(
    candidates: "list[str] | tuple[str, ...]",
    cursor: int,
    title: str = DEFAULT_TITLE,
    footer: str = DEFAULT_FOOTER,
) -> list[str]:
    """Render the picker as plain text lines.

    The candidate at ``cursor`` is prefixed with ``>``, every other one with a
    blank of the same width. Candidate i is always at line ``HEADER_LINES + i``.
    """
    lines = [title, ""]
    if not candidates:
        lines.append(EMPTY_LIST_TEXT)
    for i, path in enumerate(candidates):
        marker = CURSOR_MARKER if i == cursor else " " * len(CURSOR_MARKER)
        lines.append(f"{marker} {path}")
    lines.append("")
    lines.append(footer)
    return lines
