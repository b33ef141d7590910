"""The command processing engine: tokenize, categorize and dispatch a line."""

from __future__ import annotations

from enum import Enum, auto
from typing import Callable, Iterable, Protocol, Sequence

from .tokens import MAX_LINE_LENGTH, Keyword, Token, categorize, tokenize

Printer = Callable[..., object]


class EngineState(Enum):
    """Stages a command line passes through."""

    WAITING_FOR_DATA = auto()
    LOOKING_FOR_TOKENS = auto()
    CATEGORIZING_TOKENS = auto()
    CHECKING_SYNTAX = auto()


class ConsoleLike(Protocol):
    """What the engine needs from the console."""

    def printf(self, fmt: str, *args: object) -> int:
        """Send formatted text to the terminal."""

    def command_done(self) -> None:
        """Tell the console the line has been handled."""


class CommandGroup(Protocol):
    """A group of commands that may handle a tokenized line."""

    def dispatch(self, tokens: Sequence[Token], out: Printer) -> bool:
        """Run a matching command and report whether one ran."""


class CommandEngine:
    """Processes one command line at a time, a step per ``action`` call.

    ``commands`` are tried in order; the first that accepts the line runs.
    """

    def __init__(
        self, console: ConsoleLike, commands: Iterable[CommandGroup] = ()
    ) -> None:
        self.console = console
        self.commands = list(commands)
        self.state = EngineState.WAITING_FOR_DATA
        self.line = ""
        self.tokens: list[Token] = []

    def set_line(self, line: str) -> bool:
        """Accept ``line`` for processing if the engine is idle.

        Returns whether the line was taken.
        """
        if self.state is not EngineState.WAITING_FOR_DATA:
            return False
        self.line = line[:MAX_LINE_LENGTH]
        self.tokens = []
        self.state = EngineState.LOOKING_FOR_TOKENS
        return True

    def action(self) -> None:
        """Carry out the step due in the current state."""
        if self.state is EngineState.LOOKING_FOR_TOKENS:
            self._locate_tokens()
        elif self.state is EngineState.CATEGORIZING_TOKENS:
            self.tokens = categorize(self.tokens)
            self.state = EngineState.CHECKING_SYNTAX
        elif self.state is EngineState.CHECKING_SYNTAX:
            self._check_syntax()

    def _locate_tokens(self) -> None:
        try:
            self.tokens = tokenize(self.line)
        except ValueError:
            # No command takes that many tokens, so it can only be a syntax error.
            self.console.printf("[ERR: Syntax ]")
            self._finish()
            return
        self.state = EngineState.CATEGORIZING_TOKENS

    def _check_syntax(self) -> None:
        tokens = self.tokens
        if len(tokens) == 1 and not tokens[0].text:
            self._finish()
            return
        if tokens[0].keyword is Keyword.UNDEFINED:
            self.console.printf("[ERR: Command not found ]")
            self._finish()
            return
        out = self.console.printf
        if not any(group.dispatch(tokens, out) for group in self.commands):
            self.console.printf("[ERR: Syntax ]")
        self._finish()

    def _finish(self) -> None:
        self.state = EngineState.WAITING_FOR_DATA
        self.console.command_done()