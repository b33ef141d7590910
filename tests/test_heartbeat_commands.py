import pytest

from uartcon.commands.heartbeat import HeartbeatCommands
from uartcon.heartbeat import Heartbeat
from uartcon.tokens import categorize, tokenize


class Recorder:
    def __init__(self):
        self.parts = []

    def __call__(self, fmt, *args):
        self.parts.append(fmt % args)

    @property
    def text(self):
        return "".join(self.parts)


def make(delay_ms=1000):
    heartbeat = Heartbeat(led=lambda on: None, clock=lambda: 0, delay_ms=delay_ms)
    return heartbeat, HeartbeatCommands(heartbeat)


def run(commands, line):
    out = Recorder()
    handled = commands.dispatch(categorize(tokenize(line)), out)
    return handled, out.text


def test_root_help():
    _, commands = make()
    out = Recorder()
    commands.root_help(out)
    assert out.text == "      hrtbt - Issue commands to the heartbeat module\r\n"


def test_help():
    _, commands = make()
    handled, text = run(commands, "hrtbt help")
    assert handled is True
    assert text == (
        "hrtbt command actions\r\n\r\n"
        "get - Retrieve the current value for a setting\r\n"
        "set - Institute a given value for a setting\r\n"
    )


@pytest.mark.parametrize("line", ["hrtbt get help", "hrtbt set help"])
def test_get_set_help(line):
    _, commands = make()
    handled, text = run(commands, line)
    assert handled is True
    assert text.startswith("hrtbt command settings\r\n\r\n")
    assert text.endswith("        milliseconds\r\n")


def test_set_delay_help():
    _, commands = make()
    handled, text = run(commands, "hrtbt set delay help")
    assert handled is True
    assert text.endswith("It needs to be an integer.\r\n")


def test_get_delay_reports_current_value():
    _, commands = make(delay_ms=1000)
    handled, text = run(commands, "hrtbt get delay")
    assert handled is True
    assert text == "Heartbeat LED toggle delay: 1000 milliseconds\r\n"


def test_set_delay_updates_heartbeat():
    heartbeat, commands = make()
    handled, text = run(commands, "hrtbt set delay 250")
    assert handled is True
    assert text == "Heartbeat delay updated.\r\n"
    assert heartbeat.delay_ms == 250
    _, text = run(commands, "hrtbt get delay")
    assert "250" in text


def test_set_delay_zero_rejected():
    heartbeat, commands = make(delay_ms=1000)
    handled, text = run(commands, "hrtbt set delay 0")
    assert handled is True
    assert text == "Heartbeat delay must be positive.\r\n"
    assert heartbeat.delay_ms == 1000


def test_set_delay_trailing_space_is_rejected():
    heartbeat, commands = make(delay_ms=1000)
    handled, text = run(commands, "hrtbt set delay ")
    assert handled is True
    assert text == "Heartbeat delay must be positive.\r\n"
    assert heartbeat.delay_ms == 1000


def test_keywords_case_insensitive_and_abbreviated():
    heartbeat, commands = make()
    handled, _ = run(commands, "HR SET DEL 42")
    assert handled is True
    assert heartbeat.delay_ms == 42


@pytest.mark.parametrize(
    "line",
    ["hrtbt", "hrtbt get", "hrtbt set delay abc", "ntwrk help", "hrtbt get delay 5"],
)
def test_unmatched_lines_are_not_handled(line):
    heartbeat, commands = make(delay_ms=1000)
    handled, text = run(commands, line)
    assert handled is False
    assert text == ""
    assert heartbeat.delay_ms == 1000