# telnetkit

A small telnet toolkit with no dependencies outside the standard library.

## Modules

- **`telnetkit.telnet`** handles the protocol. `TelnetProtocol.feed(data)` takes one block of bytes from a server and returns a tuple `(text, reply)`.
  - `text` is the display text, decoded as Latin-1.
  - `reply` is the negotiation answer to send back.
  - The client accepts *echo* (option 1) and *suppress go-ahead* (option 3). It refuses every other option.
  - The steps are also available as separate functions: `normalize_line`, `split_options`, `arrange_reply` and `respond_to_options`.
- **`telnetkit.terminal`** provides `TerminalBuffer`, a scrolling screen of 80 columns by 200 rows by default.
  - Text is always written on the bottom row.
  - It handles backspace, tab, carriage return and line feed, and wraps at the right edge.
  - `row(index)` returns one row and `text()` returns the whole screen.
- **`telnetkit.keycodes`** provides `KeyCodeTable`, which maps key event names such as `"Arrow Up"`, `"F5"` and `"Insert"` to escape sequences.
  - The codes are stored in escaped text form, for example `"\\u001b[2~"`.
  - `initialize_key_codes()` loads the defaults.
  - `find`, `key_exists`, `get_code`, `count`, `reset`, `dump_content` and `self_test` cover lookup and upkeep.
- **`telnetkit.host`** has two functions:
  - `parse_port(text)` reads a leading integer. Text with no number counts as 0, so the result is then 20. Negative numbers give 65535.
  - `clamp_port(port)` keeps a port within 20–65535.
- **`telnetkit.cmdline`** is a minimal option parser built from `CmdlineOption`, `CmdlineParser` and `CmdLineUtil`. `CmdLineUtil` also prints help text.
- **`telnetkit.log`** has console helpers:
  - `format_console_line` formats a line and ends it with CRLF.
  - `color_scope` is a context manager that writes a start sequence and an end sequence.
  - `console_out` writes a coloured line to standard error.
  - `console_debug_log` and `console_error_log` send lines to `logging`.
- **`telnetkit.client`** provides `TelnetClient`, a blocking socket client built on the modules above. It can be used as a context manager.

## Installation

```
pip install .
```

## Command line

```
telnetkit [host] [port]
```

The command connects to `host` (default `127.0.0.1`) on `port` (default `23`). The port is read and clamped with `parse_port`.

While connected:

- Each line typed on standard input is sent followed by CR LF.
- Text from the server is written to standard output.
- Option negotiation is answered automatically.

The session ends when the server closes the connection or on Ctrl+C.

## Library use

```python
from telnetkit.telnet import TelnetProtocol
from telnetkit.terminal import TerminalBuffer

protocol = TelnetProtocol()
text, reply = protocol.feed(b"\xff\xfd\x01login: ")
# text == "login: ", reply == b"\xff\xfb\x01" (WILL echo)

screen = TerminalBuffer()
screen.write("hello\r\nworld")
print(screen.text())
```

```python
from telnetkit.keycodes import KeyCodeTable

table = KeyCodeTable()
table.initialize_key_codes()
print(table.get_code("Insert"))  # \u001b[2~
```

## What it does not do

- The package reads no settings or configuration files. Host and port come only from the command line or from `TelnetClient` arguments.
- `TerminalBuffer` does not interpret ANSI escape sequences. They are written to the screen as plain characters.
- There is no graphical window, and there is no server.

## Tests

```
pip install .[test]
pytest
```