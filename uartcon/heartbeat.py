"""Periodically toggled heartbeat LED."""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable

DEFAULT_DELAY_MS = 1000


class LedState(Enum):
    """State of the heartbeat LED."""

    ON = "on"
    OFF = "off"
    UNSET = "unset"


def _millis() -> int:
    return time.monotonic_ns() // 1_000_000


class Heartbeat:
    """Toggles an LED every ``delay_ms`` milliseconds.

    ``led`` is called with True to light the LED and False to darken it;
    ``clock`` returns the current time in milliseconds.
    """

    def __init__(
        self,
        led: Callable[[bool], object],
        clock: Callable[[], int] = _millis,
        delay_ms: int = DEFAULT_DELAY_MS,
    ) -> None:
        self.led = led
        self.clock = clock
        self.delay_ms = delay_ms
        self.state = LedState.UNSET
        self.next_toggle_ms = 0

    def configure(self) -> None:
        """Switch the LED off and record that state."""
        self.led(False)
        self.state = LedState.OFF

    def action(self) -> None:
        """Toggle the LED when its toggle time has come."""
        now = self.clock()
        if self.next_toggle_ms > now:
            return
        if self.state is LedState.OFF:
            self.led(True)
            self.state = LedState.ON
        else:
            self.led(False)
            self.state = LedState.OFF
        self.next_toggle_ms = now + self.delay_ms