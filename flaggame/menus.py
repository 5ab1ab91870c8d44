"""The opening logo sequence and the how-to-play pages."""

from __future__ import annotations

from .keys import Button, KeyState
from .scenes import Scene, SceneManager

TITLE = "title"
ACT = "act"

OK_BUTTON = Button.A
CANCEL_BUTTON = Button.X
FIRST_BUTTON = Button.A
SECOND_BUTTON = Button.X

SELECT_SOUND = "select"

LOGO_FADE_FRAMES = 30 * 4
STORY_FRAMES = 60 * 20
STORY_FADE_START = 60 * 18
FADE_STEP = 30
FADE_LAST = 3
LINE_COUNT = 360
SWAY_BASE = 30
LINE_AWAY = 640

OPTION_CAPTION = "A:NEXT B:BACK"
OPTION_PAGES = 2


def _trunc_div(value: int, step: int) -> int:
    quotient = abs(value) // abs(step)
    return quotient if (value >= 0) == (step > 0) else -quotient


class LogoScene(Scene):
    """The logo, then a story screen whose lines slide in one by one.

    Either of the first two buttons skips straight to the title.
    """

    def __init__(self, keys: KeyState, manager: SceneManager) -> None:
        self.keys = keys
        self.manager = manager
        self.phase = 0
        self.counter = 0
        self.sway: list[int] = []
        self.fade_frame: int | None = None
        self.line_offsets: list[int] = []
        self._ticks = 0

    def enter(self) -> None:
        self.phase = 0
        self.counter = 0
        self.fade_frame = None
        self.line_offsets = []
        self.sway = [i + SWAY_BASE for i in range(LINE_COUNT)]

    def update(self) -> None:
        even_tick = self._ticks % 2 == 0
        self._ticks += 1
        if (
            self.keys.is_pushed(FIRST_BUTTON)
            or self.keys.is_pushed(SECOND_BUTTON)
            or self.phase >= 2
        ):
            self.manager.request(TITLE)
            return

        if self.phase == 0:
            if self.counter >= LOGO_FADE_FRAMES:
                self.counter = 0
                self.phase = 1
        elif self.phase == 1:
            if even_tick:
                self.sway[1:] = [max(value - 1, 0) for value in self.sway[1:]]
            if self.counter >= STORY_FRAMES:
                self.counter = 0
                self.phase = 2

    def draw(self) -> None:
        """Advance the frame counter and work out what the screen shows."""
        self.counter += 1
        self.fade_frame = None
        if self.phase == 0:
            self.line_offsets = []
            if self.counter > 0:
                frame = _trunc_div(LOGO_FADE_FRAMES - self.counter, FADE_STEP)
                self.fade_frame = min(frame, FADE_LAST)
        elif self.phase == 1:
            self.line_offsets = [0 if value == 0 else LINE_AWAY for value in self.sway]
            if self.counter >= STORY_FADE_START:
                frame = (self.counter - STORY_FADE_START) // FADE_STEP
                self.fade_frame = min(frame, FADE_LAST)
        else:
            self.line_offsets = []


class OptionScene(Scene):
    """Pages of instructions: OK goes forward, cancel goes back."""

    caption = OPTION_CAPTION

    def __init__(self, keys: KeyState, manager: SceneManager) -> None:
        self.keys = keys
        self.manager = manager
        self.page = 0
        self.shown_page: int | None = None
        self.sound_events: list[str] = []

    def enter(self) -> None:
        self.page = 0
        self.shown_page = None

    def update(self) -> None:
        if self.keys.is_pushed(OK_BUTTON):
            self.sound_events.append(SELECT_SOUND)
            self.page += 1
            if self.page == OPTION_PAGES:
                self.manager.request(TITLE)
        if self.keys.is_pushed(CANCEL_BUTTON):
            self.sound_events.append(SELECT_SOUND)
            self.page -= 1
            if self.page == -1:
                self.manager.request(TITLE)

    def draw(self) -> None:
        """Show the current page."""
        self.shown_page = self.page