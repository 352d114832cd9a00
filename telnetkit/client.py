"""A telnet client: connection, option replies and the screen buffer."""

from __future__ import annotations

import argparse
import logging
import socket
import sys
import threading
from collections.abc import Sequence

from telnetkit.host import DEFAULT_HOSTS, DEFAULT_PORT_TEXT, parse_port
from telnetkit.telnet import TelnetProtocol
from telnetkit.terminal import TerminalBuffer

logger = logging.getLogger(__name__)

IO_BUFFER_SIZE = 1024
VK_RETURN = 13
_ENCODING = "latin-1"


class TelnetClient:
    """A connection to one telnet server."""

    def __init__(
        self,
        host: str,
        port: int = 23,
        sock: socket.socket | None = None,
        terminal: TerminalBuffer | None = None,
        timeout: float | None = 10.0,
    ) -> None:
        self.host = host
        self.port = port
        self.timeout = timeout
        self.terminal = terminal if terminal is not None else TerminalBuffer()
        self.protocol = TelnetProtocol()
        self._sock = sock

    @property
    def connected(self) -> bool:
        return self._sock is not None

    def __enter__(self) -> TelnetClient:
        self.connect()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def connect(self) -> None:
        """Open the connection to the server unless it is already open."""
        if self._sock is not None:
            return
        logger.debug("connect %s:%d", self.host, self.port)
        sock = socket.create_connection((self.host, self.port), timeout=self.timeout)
        sock.settimeout(None)
        self._sock = sock

    def _require_socket(self) -> socket.socket:
        if self._sock is None:
            raise ConnectionError("not connected")
        return self._sock

    def send_text(self, text: str | bytes) -> None:
        """Send ``text`` to the server."""
        data = text if isinstance(text, bytes) else text.encode(_ENCODING, errors="replace")
        logger.debug("send %r", data)
        self._require_socket().sendall(data)

    def send_key(self, char: str | int) -> None:
        """Send one typed character; Return is sent as CR LF."""
        code = char if isinstance(char, int) else ord(char)
        if code == VK_RETURN:
            self.send_text("\r\n")
        else:
            self.send_text(chr(code))

    def process_incoming(self, data: bytes) -> str:
        """Handle one block from the server: answer its options, show its text.

        Returns the text that was written to the terminal.
        """
        text, reply = self.protocol.feed(data)
        if reply:
            self.send_text(reply)
        self.terminal.write(text)
        return text

    def receive(self) -> str | None:
        """Read and process one block; return its text, or None once the server closed."""
        sock = self._require_socket()
        data = sock.recv(IO_BUFFER_SIZE)
        if not data:
            logger.debug("connection closed by server")
            self.close()
            return None
        return self.process_incoming(data)

    def close(self) -> None:
        """Close the connection if it is open."""
        if self._sock is None:
            return
        sock, self._sock = self._sock, None
        try:
            sock.shutdown(socket.SHUT_RDWR)
        except OSError:
            pass
        sock.close()


def _forward_input(client: TelnetClient) -> None:
    try:
        for line in sys.stdin:
            client.send_text(line.rstrip("\r\n"))
            client.send_key(VK_RETURN)
    except (OSError, ConnectionError):
        pass


def main(argv: Sequence[str] | None = None) -> int:
    """Connect to a telnet server and relay standard input and output."""
    parser = argparse.ArgumentParser(prog="telnetkit", description="Simple telnet client.")
    parser.add_argument("host", nargs="?", default=DEFAULT_HOSTS[-1])
    parser.add_argument("port", nargs="?", default=DEFAULT_PORT_TEXT)
    args = parser.parse_args(argv)

    client = TelnetClient(args.host, parse_port(args.port))
    try:
        client.connect()
    except OSError as exc:
        print(f"Could not connect to {args.host}:{client.port}: {exc}", file=sys.stderr)
        return 1

    threading.Thread(target=_forward_input, args=(client,), daemon=True).start()
    try:
        while True:
            text = client.receive()
            if text is None:
                break
            sys.stdout.write(text)
            sys.stdout.flush()
    except KeyboardInterrupt:
        pass
    except OSError as exc:
        print(f"Connection error: {exc}", file=sys.stderr)
        return 1
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())