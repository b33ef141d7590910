"""The ``hrtbt`` command group: read and change the heartbeat LED delay."""

from __future__ import annotations

from typing import Callable, Sequence

from ..heartbeat import Heartbeat
from ..tokens import (
    CommandSyntax,
    Keyword,
    SyntaxToken,
    Token,
    TokenCategory,
    match_syntax,
)

Printer = Callable[..., object]


def _keyword(code: Keyword) -> SyntaxToken:
    return SyntaxToken(TokenCategory.KEYWORD, code)


def _leading_integer(text: str) -> int:
    """Parse the leading decimal digits of ``text``; 0 when there are none."""
    digits = ""
    for ch in text:
        if not ch.isdigit():
            break
        digits += ch
    return int(digits) if digits else 0


class HeartbeatCommands:
    """Runs ``hrtbt ...`` command lines against a :class:`Heartbeat`.

    ``out`` passed to the methods is a printf-style callable taking a
    format string and its arguments, such as ``Console.printf``.
    """

    def __init__(self, heartbeat: Heartbeat) -> None:
        self.heartbeat = heartbeat
        hrtbt = _keyword(Keyword.HRTBT)
        get = _keyword(Keyword.GET)
        put = _keyword(Keyword.SET)
        delay = _keyword(Keyword.DELAY)
        help_ = _keyword(Keyword.HELP)
        self._syntax = (
            CommandSyntax((hrtbt, help_), self._help),
            CommandSyntax((hrtbt, get, help_), self._get_set_help),
            CommandSyntax((hrtbt, put, help_), self._get_set_help),
            CommandSyntax((hrtbt, get, delay), self._get_delay),
            CommandSyntax((hrtbt, put, delay, help_), self._set_delay_help),
            CommandSyntax(
                (hrtbt, put, delay, SyntaxToken(TokenCategory.INTEGER)),
                self._set_delay,
            ),
        )

    def root_help(self, out: Printer) -> None:
        """Print the group's line of the root help."""
        out("      hrtbt - Issue commands to the heartbeat ")
        out("module\r\n")

    def dispatch(self, tokens: Sequence[Token], out: Printer) -> bool:
        """Run the command ``tokens`` form, if any; report whether one ran."""
        entry = match_syntax(self._syntax, tokens)
        if entry is None:
            return False
        entry.action(tokens, out)
        return True

    def _get_delay(self, tokens: Sequence[Token], out: Printer) -> None:
        out(
            "Heartbeat LED toggle delay: %d milliseconds\r\n",
            self.heartbeat.delay_ms,
        )

    def _set_delay(self, tokens: Sequence[Token], out: Printer) -> None:
        value = _leading_integer(tokens[3].text)
        if value < 1:
            out("Heartbeat delay must be positive.\r\n")
            return
        self.heartbeat.delay_ms = value
        out("Heartbeat delay updated.\r\n")

    def _help(self, tokens: Sequence[Token], out: Printer) -> None:
        out("hrtbt command actions\r\n\r\n")
        out("get - Retrieve the current value for a setting\r\n")
        out("set - Institute a given value for a setting\r\n")

    def _get_set_help(self, tokens: Sequence[Token], out: Printer) -> None:
        out("hrtbt command settings\r\n\r\n")
        out("delay - This is the time it takes for the heartbeat LED to change")
        out("states in\r\n")
        out("        milliseconds\r\n")

    def _set_delay_help(self, tokens: Sequence[Token], out: Printer) -> None:
        out("This is the duration in milliseconds after which the LED state ")
        out("toggles.\r\n")
        out("It needs to be an integer.\r\n")