"""Byte-by-byte editing of a single console command line."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

MAX_LINE_LENGTH = 128
ESCAPE_BUFFER_SIZE = 8

ERASE_TO_END = b"\x1b[K"
BACKSPACE_ECHO = b"\b" + ERASE_TO_END

_ESC = 0x1B
_RETURN = 0x0D


class Key(Enum):
    """Special keys recognised by the line editor."""

    BACKSPACE = "backspace"
    CTRL_C = "ctrl-c"
    DELETE = "delete"
    DOWN = "down"
    END = "end"
    HOME = "home"
    INSERT = "insert"
    LEFT = "left"
    KP_ENTER = "keypad-enter"
    RIGHT = "right"
    PGDOWN = "page-down"
    PGUP = "page-up"
    UP = "up"


@dataclass(frozen=True)
class EditEvent:
    """What feeding one byte did.

    ``key`` is the special key that was completed, ``output`` the bytes to
    echo back to the terminal, ``submit`` is set when the line was entered
    and ``cancel`` when it was abandoned.
    """

    key: Optional[Key] = None
    output: bytes = b""
    submit: bool = False
    cancel: bool = False


_CONTROL_KEYS: dict[int, Key] = {
    0x08: Key.BACKSPACE,
    0x7F: Key.BACKSPACE,
    0x03: Key.CTRL_C,
}

_ESCAPE_KEYS: dict[bytes, Key] = {
    b"\x1b[3~": Key.DELETE,
    b"\x1b[B": Key.DOWN,
    b"\x1b[F": Key.END,
    b"\x1b[H": Key.HOME,
    b"\x1b[2~": Key.INSERT,
    b"\x1bOM": Key.KP_ENTER,
    b"\x1b[D": Key.LEFT,
    b"\x1b[C": Key.RIGHT,
    b"\x1b[6~": Key.PGDOWN,
    b"\x1b[5~": Key.PGUP,
    b"\x1b[A": Key.UP,
}


def _is_control(byte: int) -> bool:
    return byte <= 0x1F or byte == 0x7F


class LineEditor:
    """An editable command line with a cursor.

    ``capacity`` counts the terminating NUL of the original buffer, so at
    most ``capacity - 1`` characters are kept.
    """

    def __init__(self, capacity: int = MAX_LINE_LENGTH + 1) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self.cursor = 0
        self._buffer = bytearray()
        self._escape = bytearray()

    @property
    def line(self) -> bytes:
        """The characters of the current line."""
        return bytes(self._buffer)

    @property
    def in_escape(self) -> bool:
        """True while an escape sequence is being collected."""
        return bool(self._escape)

    def __len__(self) -> int:
        return len(self._buffer)

    def feed(self, byte: int) -> EditEvent:
        """Process one received byte and report what it did."""
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"not a byte: {byte!r}")
        if self._escape:
            return self._feed_escape(byte)
        if _is_control(byte):
            return self._feed_control(byte)
        self._insert(byte)
        return EditEvent()

    def clear(self) -> None:
        """Empty the line and forget any partial escape sequence."""
        self._buffer.clear()
        self._escape.clear()
        self.cursor = 0

    def _insert(self, byte: int) -> None:
        if len(self._buffer) + 1 >= self.capacity:
            return
        self._buffer.insert(self.cursor, byte)
        self.cursor += 1

    def _feed_control(self, byte: int) -> EditEvent:
        if byte == _RETURN:
            return EditEvent(submit=True)
        if byte == _ESC:
            self._escape.append(byte)
            return EditEvent()
        key = _CONTROL_KEYS.get(byte)
        if key is None:
            return EditEvent()
        return self._apply(key)

    def _feed_escape(self, byte: int) -> EditEvent:
        if (
            len(self._escape) + 1 >= ESCAPE_BUFFER_SIZE
            or byte < 0x20
            or byte > 0x7F
        ):
            self._escape.clear()
            return EditEvent()
        self._escape.append(byte)
        key = _ESCAPE_KEYS.get(bytes(self._escape))
        if key is None:
            return EditEvent()
        self._escape.clear()
        return self._apply(key)

    def _apply(self, key: Key) -> EditEvent:
        if key is Key.BACKSPACE:
            return EditEvent(key=key, output=self._backspace())
        if key is Key.CTRL_C:
            return EditEvent(key=key, cancel=True)
        if key is Key.DELETE:
            return EditEvent(key=key, output=self._delete())
        if key is Key.END:
            self.cursor = len(self._buffer)
        elif key is Key.HOME:
            self.cursor = 0
        elif key is Key.KP_ENTER:
            return EditEvent(key=key, submit=True)
        elif key is Key.LEFT:
            if self.cursor:
                self.cursor -= 1
        elif key is Key.RIGHT:
            if self.cursor < len(self._buffer):
                self.cursor += 1
        return EditEvent(key=key)

    def _backspace(self) -> bytes:
        if not self.cursor or not self._buffer:
            return b""
        del self._buffer[self.cursor - 1]
        self.cursor -= 1
        return BACKSPACE_ECHO

    def _delete(self) -> bytes:
        if self.cursor >= len(self._buffer):
            return b""
        del self._buffer[self.cursor]
        self.cursor = min(self.cursor, len(self._buffer))
        return ERASE_TO_END