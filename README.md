# uartcon

A small interactive console for byte-oriented serial links, together with a
keyword-driven command engine.

The console reads raw bytes through a `read` callable, edits a command line in
place, redraws a coloured prompt using ANSI escape sequences, and passes each
entered line to an `on_line` callback. A `CommandEngine` splits such a line
into space-separated tokens, classifies each token as an integer, a decimal, a
keyword or a plain string, and runs the first command whose syntax matches.

The package has no third-party dependencies.

## Modules

- `uartcon.line_editor` – `LineEditor`, an editable line with a cursor.
  `LineEditor.feed(byte)` processes one byte and returns an `EditEvent`
  (`key`, `output` bytes to echo, `submit`, `cancel`). `LineEditor.clear()`
  empties the line. The line holds at most `capacity - 1` characters
  (127 by default); further characters are dropped.
- `uartcon.console` – `Console(read, write, on_line)`, the prompt-and-read
  state machine (`ConsoleState`), with `action()`, `show_prompt()`,
  `printf(fmt, *args)` and `command_done()`.
- `uartcon.serial_port` – `StreamPort(reader, writer, chunk_size)`, whose
  `read(size)` returns only what is waiting and whose `write(data)` hands the
  data to the writer in chunks of at most `chunk_size` bytes, retrying until
  all of it is taken.
- `uartcon.tokens` – `tokenize`, `categorize`, `is_integer`, `is_decimal`,
  `lookup_keyword`, `keyword_name`, `keyword_code`, `skip_spaces`,
  `match_syntax`, and the `Keyword`, `TokenCategory`, `Token`, `SyntaxToken`
  and `CommandSyntax` types.
- `uartcon.engine` – `CommandEngine(console, commands)`, which takes a line
  with `set_line(line)` and, one step per `action()` call, tokenizes,
  categorizes and dispatches it (`EngineState`).
- `uartcon.heartbeat` – `Heartbeat(led, clock, delay_ms)`, which toggles an
  LED through the `led` callable every `delay_ms` milliseconds (1000 by
  default) when `action()` is called.
- `uartcon.network` – `Network(backend)`, holding the SSID name and password
  (`SsidInfo`) and the latest `WifiStatus` read from a `WifiBackend`.
- `uartcon.commands.help` – `HelpCommand(groups)`.
- `uartcon.commands.heartbeat` – `HeartbeatCommands(heartbeat)`.
- `uartcon.commands.network` – `NetworkCommands(network)`.

## Line editing

| Input                    | Effect                                   |
|--------------------------|------------------------------------------|
| printable byte           | inserted at the cursor                   |
| Return, keypad Enter     | line is entered                          |
| Backspace (`\b`, `\x7f`) | deletes the character before the cursor  |
| Delete (`ESC [3~`)       | deletes the character under the cursor   |
| Left / Right arrows      | move the cursor                          |
| Home / End               | move the cursor to the start / end       |
| Ctrl+C                   | abandons the line                        |

Up, Down, Insert, Page Up and Page Down are recognised and ignored. Other
control bytes and unknown escape sequences are dropped.

## Tokenizing a line

```python
from uartcon.tokens import tokenize, categorize

tokens = categorize(tokenize("hrtbt set delay 500"))
for token in tokens:
    print(token.text, token.category, token.keyword)
```

Only the first 128 characters of a line are used. A token made only of digits
is an integer; one made only of digits and dots is a decimal; one that is a
case-insensitive prefix of a keyword is that keyword (so `hr` means `hrtbt`,
and `?` means `help`); anything else is a string. `tokenize` raises
`ValueError` for more than 14 tokens.

## Commands understood

```
? | help                         show the root help
hrtbt help                       list heartbeat actions
hrtbt get help | hrtbt set help  list heartbeat settings
hrtbt get delay                  show the LED toggle delay
hrtbt set delay help             explain the delay setting
hrtbt set delay <integer>        change the LED toggle delay (must be positive)
ntwrk help                       list network actions
ntwrk status                     show the Wi-Fi status
ntwrk scan                       list visible networks
ntwrk connect                    connect using the stored SSID name and password
ntwrk get ip                     show the board's address
ntwrk ping <decimal>             ping an address such as 192.168.1.1
ntwrk get ssid [name|pass]       show the stored SSID details
ntwrk set ssid name <string>     store the SSID name (at most 25 characters)
ntwrk set ssid pass <string>     store the SSID password (at most 25 characters)
```

A value given to `set ssid name` or `set ssid pass` must be categorized as a
string, so it cannot be all digits or a keyword prefix. A new value is written
over the start of the stored one: a shorter value leaves the tail of a longer
earlier value in place.

An empty line does nothing; a line whose first word is not a keyword prints
`[ERR: Command not found ]`, and a line that matches no command (or has too
many tokens) prints `[ERR: Syntax ]`.

## Wiring it together

```python
from uartcon.console import Console
from uartcon.engine import CommandEngine
from uartcon.heartbeat import Heartbeat
from uartcon.network import Network
from uartcon.serial_port import StreamPort
from uartcon.commands.help import HelpCommand
from uartcon.commands.heartbeat import HeartbeatCommands
from uartcon.commands.network import NetworkCommands

port = StreamPort(reader, writer)          # your device's read/write callables
heartbeat = Heartbeat(led=set_led)         # set_led(True) lights the LED
network = Network(my_wifi_backend)         # any object satisfying WifiBackend
heartbeat_cmds = HeartbeatCommands(heartbeat)
network_cmds = NetworkCommands(network)

console = Console(port.read, port.write, on_line=lambda line: engine.set_line(line))
engine = CommandEngine(
    console,
    [HelpCommand([heartbeat_cmds, network_cmds]), heartbeat_cmds, network_cmds],
)

heartbeat.configure()
network.configure()
while True:
    console.action()
    engine.action()
    heartbeat.action()
    network.action()
```

When the engine has finished with a line it calls `Console.command_done()`,
and the console prints a fresh prompt.

## What it does not do

- It opens no serial device itself: `StreamPort` and `Console` work on the
  callables you give them.
- It contains no Wi-Fi implementation: status, connecting, scanning, pinging
  and the local address all come from the `WifiBackend` you supply.
- It keeps no command history and installs no command-line program; you run
  the main loop yourself.