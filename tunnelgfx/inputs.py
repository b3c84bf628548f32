"""Keyboard, mouse and gamepad state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import Callable, Iterable, Optional

_KEY_TABLE: list[tuple[str, int]] = (
    [(f"DIGIT_{digit}", 0x30 + digit) for digit in range(10)]
    + [(chr(code), code) for code in range(ord("A"), ord("Z") + 1)]
    + [(f"F{number}", 0x6F + number) for number in range(1, 13)]
    + [
        ("TAB", 0x09),
        ("CAPSLOCK", 0x14),
        ("SHIFT", 0x10),
        ("CTRL", 0x11),
        ("WIN", 0x5D),
        ("ALT", 0x12),
        ("SPACE", 0x20),
        ("ENTER", 0x0D),
        ("BACKSPACE", 0x08),
        # Punctuation on a US keyboard layout.
        ("TILDE", 0xC0),
        ("MINUS", 0xBD),
        ("EQUAL", 0xBB),
        ("LEFT_BRACKET", 0xDB),
        ("RIGHT_BRACKET", 0xDD),
        ("BACKSLASH", 0xDC),
        ("SEMICOLON", 0xBA),
        ("QUOTE", 0xDE),
        ("COMMA", 0xBC),
        ("PERIOD", 0xBE),
        ("SLASH", 0xBF),
        ("PAGEUP", 0x21),
        ("PAGEDOWN", 0x22),
        ("END", 0x23),
        ("HOME", 0x24),
        ("DEL", 0x2E),
        ("INS", 0x2D),
        ("LEFT", 0x25),
        ("UP", 0x26),
        ("RIGHT", 0x27),
        ("DOWN", 0x28),
    ]
    + [(f"NUMPAD{digit}", 0x60 + digit) for digit in range(10)]
    + [
        ("NUMPAD_PERIOD", 0x6E),
        ("NUMPAD_ENTER", 0x0D),
        ("NUMPAD_PLUS", 0x6B),
        ("NUMPAD_MINUS", 0x6D),
        ("NUMPAD_MULT", 0x6A),
        ("NUMPAD_DIV", 0x6F),
        ("NUMLOCK", 0x90),
    ]
)

Key = IntEnum(  # type: ignore[misc]
    "Key",
    [(name, index) for index, (name, _) in enumerate(_KEY_TABLE)],
    module=__name__,
)
Key.__doc__ = "Keys the engine knows, numbered from 0."

_VIRTUAL_KEY_CODES: tuple[int, ...] = tuple(code for _, code in _KEY_TABLE)


def _as_key(key: int) -> "Key":
    try:
        return Key(key)
    except ValueError:
        raise ValueError(f"invalid key: {key!r}") from None


def virtual_key_code(key: int) -> int:
    """The platform virtual-key code that ``key`` corresponds to."""
    return _VIRTUAL_KEY_CODES[_as_key(key)]


class Keyboard:
    """Set of keys currently held down."""

    def __init__(self, pressed: Iterable[int] = ()) -> None:
        self._down: set[Key] = {_as_key(key) for key in pressed}

    def press(self, key: int) -> None:
        self._down.add(_as_key(key))

    def release(self, key: int) -> None:
        self._down.discard(_as_key(key))

    def is_down(self, key: int) -> bool:
        return _as_key(key) in self._down


@dataclass
class Mouse:
    """Cursor position and the movement since the previous update."""

    x: int = 0
    y: int = 0
    prev_x: int = 0
    prev_y: int = 0
    delta_x: int = 0
    delta_y: int = 0
    set_pos: bool = False

    def move_to(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def update(self) -> None:
        """Compute the movement since the last update and remember the position."""
        self.delta_x = self.x - self.prev_x
        self.delta_y = self.y - self.prev_y
        self.prev_x = self.x
        self.prev_y = self.y


class GamepadButton(IntFlag):
    """Gamepad button bits."""

    NONE = 0
    DPAD_UP = 0x0001
    DPAD_DOWN = 0x0002
    DPAD_LEFT = 0x0004
    DPAD_RIGHT = 0x0008
    START = 0x0010
    BACK = 0x0020
    LEFT_THUMB = 0x0040
    RIGHT_THUMB = 0x0080
    LEFT_SHOULDER = 0x0100
    RIGHT_SHOULDER = 0x0200
    A = 0x1000
    B = 0x2000
    X = 0x4000
    Y = 0x8000


@dataclass(frozen=True)
class GamepadState:
    """A snapshot of one controller."""

    buttons: GamepadButton = GamepadButton.NONE
    left_trigger: int = 0
    right_trigger: int = 0
    lx: int = 0
    ly: int = 0
    rx: int = 0
    ry: int = 0

    def pressed(self, button: GamepadButton) -> bool:
        return bool(self.buttons & button)


MAX_CONTROLLERS = 4

Poll = Callable[[int], Optional[GamepadState]]


@dataclass
class Gamepad:
    """Tracks up to four controllers through ``poll``, which returns None for an absent one."""

    poll: Poll
    connected: list[bool] = field(default_factory=lambda: [False] * MAX_CONTROLLERS)
    states: list[GamepadState] = field(
        default_factory=lambda: [GamepadState() for _ in range(MAX_CONTROLLERS)]
    )

    def check_connected(self) -> None:
        self.connected = [self.poll(index) is not None for index in range(MAX_CONTROLLERS)]

    def update(self) -> None:
        """Refresh the state of every connected controller."""
        for index, is_connected in enumerate(self.connected):
            if is_connected:
                self.states[index] = self.poll(index) or GamepadState()

    @property
    def state(self) -> GamepadState:
        """State of the first controller."""
        return self.states[0]