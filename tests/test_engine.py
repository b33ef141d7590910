import pytest

from uartcon.commands.help import HelpCommand
from uartcon.commands.network import NetworkCommands
from uartcon.engine import CommandEngine, EngineState
from uartcon.network import Network, WifiStatus
from uartcon.tokens import Keyword, TokenCategory


class FakeConsole:
    def __init__(self):
        self.lines = []
        self.done = 0

    def printf(self, fmt, *args):
        text = fmt % args
        self.lines.append(text)
        return len(text)

    def command_done(self):
        self.done += 1

    @property
    def text(self):
        return "".join(self.lines)


class FakeBackend:
    def status(self):
        return WifiStatus.CONNECTED

    def begin(self, ssid, password):
        pass

    def local_ip(self):
        return "10.0.0.7"

    def ping(self, address):
        raise AssertionError("not expected")

    def scan(self):
        return []


@pytest.fixture
def console():
    return FakeConsole()


@pytest.fixture
def engine(console):
    network = Network(FakeBackend())
    network_commands = NetworkCommands(network)
    return CommandEngine(console, [HelpCommand([network_commands]), network_commands])


def run_to_idle(engine, limit=10):
    for _ in range(limit):
        engine.action()
        if engine.state is EngineState.WAITING_FOR_DATA:
            return
    raise AssertionError("engine did not finish")


def test_starts_waiting(engine):
    assert engine.state is EngineState.WAITING_FOR_DATA


def test_state_progression(engine, console):
    assert engine.set_line("help") is True
    assert engine.state is EngineState.LOOKING_FOR_TOKENS
    engine.action()
    assert engine.state is EngineState.CATEGORIZING_TOKENS
    assert [t.text for t in engine.tokens] == ["help"]
    engine.action()
    assert engine.state is EngineState.CHECKING_SYNTAX
    assert engine.tokens[0].category is TokenCategory.KEYWORD
    assert engine.tokens[0].keyword is Keyword.HELP
    engine.action()
    assert engine.state is EngineState.WAITING_FOR_DATA
    assert console.done == 1


def test_help_runs(engine, console):
    assert engine.set_line("help") is True
    run_to_idle(engine)
    assert engine.tokens[0].keyword is Keyword.HELP
    assert console.text.startswith("Root help\r\n  ? or help - Display this message\r\n")
    assert "ntwrk - Issue commands to the network module" in console.text


def test_question_mark_is_help(engine, console):
    assert engine.set_line("?") is True
    run_to_idle(engine)
    assert engine.tokens[0].category is TokenCategory.KEYWORD
    assert engine.tokens[0].keyword is Keyword.HELP
    assert console.text.startswith("Root help\r\n")


def test_empty_line_does_nothing(engine, console):
    assert engine.set_line("") is True
    assert engine.line == ""
    run_to_idle(engine)
    assert engine.state is EngineState.WAITING_FOR_DATA
    assert console.text == ""
    assert console.done == 1


def test_unknown_command(engine, console):
    assert engine.set_line("frobnicate") is True
    run_to_idle(engine)
    assert engine.tokens[0].category is TokenCategory.STRING
    assert console.text == "[ERR: Command not found ]"
    assert console.done == 1


def test_number_is_not_a_command(engine, console):
    assert engine.set_line("42") is True
    run_to_idle(engine)
    assert engine.tokens[0].category is TokenCategory.INTEGER
    assert console.text == "[ERR: Command not found ]"


def test_syntax_error(engine, console):
    assert engine.set_line("ntwrk frobnicate") is True
    run_to_idle(engine)
    assert [t.category for t in engine.tokens] == [
        TokenCategory.KEYWORD,
        TokenCategory.STRING,
    ]
    assert console.text == "[ERR: Syntax ]"
    assert console.done == 1


def test_only_first_matching_group_runs(console):
    calls = []

    class Group:
        def __init__(self, name, accept):
            self.name = name
            self.accept = accept

        def dispatch(self, tokens, out):
            calls.append(self.name)
            return self.accept

    engine = CommandEngine(
        console, [Group("a", False), Group("b", True), Group("c", True)]
    )
    engine.set_line("help")
    run_to_idle(engine)
    assert calls == ["a", "b"]
    assert console.text == ""


def test_line_ignored_while_busy(engine):
    engine.set_line("help")
    assert engine.set_line("ntwrk status") is False
    assert engine.line == "help"


def test_line_is_truncated(engine):
    engine.set_line("x" * 200)
    assert len(engine.line) == 128


def test_too_many_tokens_is_syntax_error(engine, console):
    line = " ".join(["ntwrk"] * 15)
    assert engine.set_line(line) is True
    assert engine.line == line
    run_to_idle(engine)
    assert engine.state is EngineState.WAITING_FOR_DATA
    assert console.text == "[ERR: Syntax ]"
    assert console.done == 1


def test_action_when_idle_does_nothing(engine, console):
    engine.action()
    assert engine.state is EngineState.WAITING_FOR_DATA
    assert console.done == 0
    assert console.text == ""