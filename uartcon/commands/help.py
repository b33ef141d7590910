"""The root ``help`` command."""

from __future__ import annotations

from typing import Callable, Iterable, Protocol, Sequence

from ..tokens import (
    CommandSyntax,
    Keyword,
    SyntaxToken,
    Token,
    TokenCategory,
    match_syntax,
)

Printer = Callable[..., object]


class HelpGroup(Protocol):
    """A command group that can describe itself in the root help."""

    def root_help(self, out: Printer) -> None:
        """Print one summary line of the group through ``out``."""


class HelpCommand:
    """Answers ``help`` or ``?`` with a summary of every command group.

    ``out`` passed to ``dispatch`` is a printf-style callable taking a
    format string and its arguments, such as ``Console.printf``.
    """

    def __init__(self, groups: Iterable[HelpGroup] = ()) -> None:
        self.groups = list(groups)
        self._syntax = (
            CommandSyntax(
                (SyntaxToken(TokenCategory.KEYWORD, Keyword.HELP),),
                self._help,
            ),
        )

    def dispatch(self, tokens: Sequence[Token], out: Printer) -> bool:
        """Run the help command if ``tokens`` form one; report whether it did."""
        entry = match_syntax(self._syntax, tokens)
        if entry is None:
            return False
        entry.action(out)
        return True

    def _help(self, out: Printer) -> None:
        out("Root help\r\n")
        out("  ? or help - Display this message\r\n")
        for group in self.groups:
            group.root_help(out)