"""Command-line tokens, keywords and syntax tables."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Iterable, Optional, Sequence

MAX_LINE_LENGTH = 128
MAX_TOKENS = 14
NUM_KEYWORDS = 15

_DIGITS = frozenset("0123456789")
_DECIMAL_CHARS = frozenset("0123456789.")


class TokenCategory(Enum):
    """What kind of value a token holds."""

    UNDEFINED = 0
    INTEGER = 1
    DECIMAL = 2
    KEYWORD = 3
    STRING = 4


class Keyword(Enum):
    """Keywords understood by the command engine."""

    UNDEFINED = 0
    CONNECT = 1
    DELAY = 2
    GET = 3
    HELP = 4
    HRTBT = 5
    IP = 6
    NAME = 7
    NTWRK = 8
    PASS = 9
    PING = 10
    SCAN = 11
    SET = 12
    SSID = 13
    STATUS = 14


_KEYWORD_TABLE: tuple[tuple[str, Keyword], ...] = (
    ("?", Keyword.HELP),
    ("get", Keyword.GET),
    ("help", Keyword.HELP),
    ("hrtbt", Keyword.HRTBT),
    ("name", Keyword.NAME),
    ("ntwrk", Keyword.NTWRK),
    ("pass", Keyword.PASS),
    ("scan", Keyword.SCAN),
    ("set", Keyword.SET),
    ("ssid", Keyword.SSID),
    ("status", Keyword.STATUS),
    ("delay", Keyword.DELAY),
    ("connect", Keyword.CONNECT),
    ("ip", Keyword.IP),
    ("ping", Keyword.PING),
)


@dataclass(frozen=True)
class Token:
    """One space-separated word of a command line."""

    text: str
    category: TokenCategory = TokenCategory.UNDEFINED
    keyword: Keyword = Keyword.UNDEFINED

    def __len__(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class SyntaxToken:
    """The category and keyword a token must have at one position."""

    category: TokenCategory
    keyword: Keyword = Keyword.UNDEFINED


@dataclass(frozen=True)
class CommandSyntax:
    """A token pattern and the action run when a command line matches it."""

    tokens: tuple[SyntaxToken, ...]
    action: Callable[..., object]


def keyword_name(index: int) -> Optional[str]:
    """Return the keyword text at ``index`` of the keyword table, or None."""
    if not 0 <= index < len(_KEYWORD_TABLE):
        return None
    return _KEYWORD_TABLE[index][0]


def keyword_code(index: int) -> Optional[Keyword]:
    """Return the keyword code at ``index`` of the keyword table, or None."""
    if not 0 <= index < len(_KEYWORD_TABLE):
        return None
    return _KEYWORD_TABLE[index][1]


def lookup_keyword(text: str) -> Optional[Keyword]:
    """Find the first keyword that ``text`` abbreviates, ignoring case.

    A token matches a keyword when it is a case-insensitive prefix of it,
    so abbreviations such as ``hr`` are accepted.
    """
    lowered = text.lower()
    for name, code in _KEYWORD_TABLE:
        if name.startswith(lowered):
            return code
    return None


def skip_spaces(text: str, pos: int) -> int:
    """Return the index of the first non-space character at or after ``pos``."""
    while pos < len(text) and text[pos] == " ":
        pos += 1
    return pos


def tokenize(line: str) -> list[Token]:
    """Split a command line into uncategorized tokens.

    Only the first MAX_LINE_LENGTH characters are considered, and the line
    ends at the first NUL. Trailing spaces yield a final empty token and an
    empty line yields one empty token.

    Raises:
        ValueError: the line holds more than MAX_TOKENS tokens.
    """
    text = line.split("\0", 1)[0][:MAX_LINE_LENGTH]
    tokens: list[Token] = []
    pos = skip_spaces(text, 0)
    while True:
        stop = text.find(" ", pos)
        if stop == -1:
            stop = len(text)
        if len(tokens) == MAX_TOKENS:
            raise ValueError(f"command line holds more than {MAX_TOKENS} tokens")
        tokens.append(Token(text[pos:stop]))
        if stop == len(text):
            return tokens
        pos = skip_spaces(text, stop)


def is_integer(text: str) -> bool:
    """True when every character of ``text`` is a decimal digit."""
    return all(ch in _DIGITS for ch in text)


def is_decimal(text: str) -> bool:
    """True when every character of ``text`` is a digit or a dot."""
    return all(ch in _DECIMAL_CHARS for ch in text)


def _categorized(token: Token) -> Token:
    if is_integer(token.text):
        return replace(token, category=TokenCategory.INTEGER)
    if is_decimal(token.text):
        return replace(token, category=TokenCategory.DECIMAL)
    keyword = lookup_keyword(token.text)
    if keyword is not None:
        return replace(token, category=TokenCategory.KEYWORD, keyword=keyword)
    return replace(token, category=TokenCategory.STRING)


def categorize(tokens: Iterable[Token]) -> list[Token]:
    """Return the tokens with their category (and keyword) filled in."""
    return [_categorized(token) for token in tokens]


def _matches(pattern: Sequence[SyntaxToken], tokens: Sequence[Token]) -> bool:
    if len(pattern) != len(tokens):
        return False
    return all(
        expected == SyntaxToken(token.category, token.keyword)
        for expected, token in zip(pattern, tokens)
    )


def match_syntax(
    table: Iterable[CommandSyntax], tokens: Sequence[Token]
) -> Optional[CommandSyntax]:
    """Return the first entry of ``table`` whose pattern fits ``tokens``."""
    for entry in table:
        if _matches(entry.tokens, tokens):
            return entry
    return None