"""Interactive console driven over a byte-oriented read/write pair."""

from __future__ import annotations

from enum import Enum, auto
from typing import Callable, Optional

from .line_editor import MAX_LINE_LENGTH, EditEvent, LineEditor

READ_BUFFER_SIZE = 32
PRINTF_BUFFER_SIZE = 512

PROMPT_START = b"\r\x1b[1;32m"
PROMPT_END = b" \x1b[0;00m"
NEWLINE = b"\r\n"

_ENCODING = "latin-1"


class ConsoleState(Enum):
    """Stages the console steps through for each command line."""

    DISPLAY_PROMPT = auto()
    ACQUIRE_COMMAND_LINE = auto()
    PREPARE_PROCESS_COMMAND_LINE = auto()
    PROCESS_COMMAND_LINE = auto()
    NEWLINE_THEN_ACQUIRE = auto()


class Console:
    """A prompt that collects a command line and hands it on.

    ``read(size)`` returns up to ``size`` waiting bytes, possibly none;
    ``write(data)`` sends bytes to the terminal. ``on_line`` receives each
    entered line as text; the console then waits until ``command_done`` is
    called before prompting again.
    """

    def __init__(
        self,
        read: Callable[[int], bytes],
        write: Callable[[bytes], object],
        on_line: Optional[Callable[[str], object]] = None,
    ) -> None:
        self._read = read
        self._write = write
        self._on_line = on_line
        self.state = ConsoleState.DISPLAY_PROMPT
        self.editor = LineEditor(MAX_LINE_LENGTH + 1)

    def action(self) -> None:
        """Perform the work due in the current state."""
        state = self.state
        if state is ConsoleState.DISPLAY_PROMPT:
            self.show_prompt()
            self.state = ConsoleState.ACQUIRE_COMMAND_LINE
        elif state is ConsoleState.ACQUIRE_COMMAND_LINE:
            self._receive()
        elif state is ConsoleState.PREPARE_PROCESS_COMMAND_LINE:
            self._write(NEWLINE)
            self._write(NEWLINE)
            self.state = ConsoleState.PROCESS_COMMAND_LINE
        elif state is ConsoleState.NEWLINE_THEN_ACQUIRE:
            self._write(NEWLINE)
            self.editor.clear()
            self.state = ConsoleState.DISPLAY_PROMPT
        # While a command line is processed there is nothing to do.

    def show_prompt(self) -> None:
        """Redraw the prompt, the current line and the cursor position."""
        self._write(PROMPT_START)
        self.printf("%d $", 0)
        self._write(PROMPT_END)
        line = self.editor.line
        if line:
            self._write(line)
        behind = len(line) - self.editor.cursor
        if behind > 0:
            self.printf("\x1b[%dD", behind)

    def printf(self, fmt: str, *args: object) -> int:
        """Format with printf-style ``fmt`` and send the result.

        Output longer than the console's print buffer is truncated. Returns
        the number of bytes sent.
        """
        data = (fmt % args).encode(_ENCODING, errors="replace")
        data = data[: PRINTF_BUFFER_SIZE - 1]
        self._write(data)
        return len(data)

    def command_done(self) -> None:
        """Signal that the entered line has been processed."""
        self.state = ConsoleState.NEWLINE_THEN_ACQUIRE

    def _receive(self) -> None:
        data = self._read(READ_BUFFER_SIZE)
        if not data:
            return
        for byte in bytes(data[:READ_BUFFER_SIZE]):
            self._handle(self.editor.feed(byte))
        self.show_prompt()

    def _handle(self, event: EditEvent) -> None:
        if event.output:
            self._write(event.output)
        if event.submit:
            if self._on_line is not None:
                self._on_line(self.editor.line.decode(_ENCODING))
            self.state = ConsoleState.PREPARE_PROCESS_COMMAND_LINE
        if event.cancel:
            self.state = ConsoleState.NEWLINE_THEN_ACQUIRE