"""Controller bit masks, logical buttons and press/push tracking."""

from __future__ import annotations

from enum import IntEnum, IntFlag
from typing import Iterable

JOYSTICK_AXIS = 16384
REP_MIN = 2
REP_MAX = 30


class Pad(IntFlag):
    """Raw controller state bits."""

    NONE = 0
    DOWN = 0x01
    LEFT = 0x02
    RIGHT = 0x04
    UP = 0x08
    BUTTON1 = 0x10
    BUTTON2 = 0x20
    BUTTON3 = 0x40
    BUTTON4 = 0x80
    BUTTON5 = 0x100
    BUTTON6 = 0x200
    BUTTON7 = 0x400
    BUTTON8 = 0x800
    BUTTON9 = 0x1000
    BUTTONA = 0x2000
    BUTTONB = 0x4000

    DIR = UP | DOWN | LEFT | RIGHT
    BUTTON = (
        BUTTON1 | BUTTON2 | BUTTON3 | BUTTON4 | BUTTON5 | BUTTON6
        | BUTTON7 | BUTTON8 | BUTTON9 | BUTTONA | BUTTONB
    )
    ALL = DIR | BUTTON


class Button(IntEnum):
    """Logical buttons the game reads."""

    UP = 0
    UPLEFT = 1
    LEFT = 2
    DOWNLEFT = 3
    DOWN = 4
    DOWNRIGHT = 5
    RIGHT = 6
    UPRIGHT = 7
    START = 8
    SELECT = 9
    L = 10
    R = 11
    A = 12
    B = 13
    Y = 14
    X = 15
    VOLUP = 16
    VOLDOWN = 17
    CLICK = 18
    EXIT = 19


_PAD_TO_BUTTON = (
    (Pad.UP, Button.UP),
    (Pad.DOWN, Button.DOWN),
    (Pad.LEFT, Button.LEFT),
    (Pad.RIGHT, Button.RIGHT),
    (Pad.BUTTON1, Button.A),
    (Pad.BUTTON2, Button.X),
    (Pad.BUTTON3, Button.Y),
    (Pad.BUTTON4, Button.B),
    (Pad.BUTTON5, Button.R),
    (Pad.BUTTON6, Button.L),
    (Pad.BUTTON7, Button.VOLDOWN),
    (Pad.BUTTON8, Button.VOLUP),
    (Pad.BUTTON9, Button.SELECT),
    (Pad.BUTTONA, Button.START),
    (Pad.BUTTONB, Button.CLICK),
)


def pad_to_buttons(pad: int) -> set[Button]:
    """Translate raw pad bits into the logical buttons they press."""
    return {button for bit, button in _PAD_TO_BUTTON if pad & bit}


class KeyState:
    """Tracks which buttons are held and which were pressed this frame."""

    def __init__(self) -> None:
        self._pressed: frozenset[Button] = frozenset()
        self._pushed: frozenset[Button] = frozenset()

    def update(self, pressed: Iterable[Button]) -> None:
        """Record the buttons held in the new frame."""
        current = frozenset(Button(b) for b in pressed)
        self._pushed = current - self._pressed
        self._pressed = current

    def is_pressed(self, button: Button) -> bool:
        """Return whether ``button`` is held down."""
        return button in self._pressed

    def is_pushed(self, button: Button) -> bool:
        """Return whether ``button`` went down in the latest frame."""
        return button in self._pushed


def adjust_volume(volume: int, delta: int, maximum: int) -> int:
    """Change ``volume`` by ``delta``, kept between 0 and ``maximum``."""
    return max(0, min(volume + delta, maximum))