import socket

import pytest

from telnetkit.client import TelnetClient, main
from telnetkit.telnet import DO, IAC, WILL


@pytest.fixture
def pair():
    a, b = socket.socketpair()
    b.settimeout(5)
    yield a, b
    a.close()
    b.close()


def test_send_key_plain_character(pair):
    a, b = pair
    client = TelnetClient("localhost", 23, sock=a)
    peer = TelnetClient("localhost", 23, sock=b)
    client.send_key("x")
    assert peer.receive() == "x"


def test_send_key_return_sends_crlf(pair):
    a, b = pair
    client = TelnetClient("localhost", 23, sock=a)
    peer = TelnetClient("localhost", 23, sock=b)
    client.send_key("\r")
    assert peer.receive() == "\r\n"


def test_send_key_accepts_code(pair):
    a, b = pair
    client = TelnetClient("localhost", 23, sock=a)
    peer = TelnetClient("localhost", 23, sock=b)
    client.send_key(ord("q"))
    assert peer.receive() == "q"


def test_process_incoming_answers_options_and_shows_text(pair):
    a, b = pair
    client = TelnetClient("localhost", 23, sock=a)
    text = client.process_incoming(bytes([IAC, DO, 1]) + b"hi")
    assert text == "hi"
    assert b.recv(16) == bytes([IAC, WILL, 1])
    assert client.terminal.row(-1).startswith("hi")


def test_receive_writes_lines_to_terminal(pair):
    a, b = pair
    client = TelnetClient("localhost", 23, sock=a)
    b.sendall(b"hello\r\n")
    text = client.receive()
    assert text == "hello\r\n"
    assert client.terminal.row(-2).startswith("hello")
    assert client.terminal.cursor_x == 0


def test_receive_returns_none_when_server_closes(pair):
    a, b = pair
    client = TelnetClient("localhost", 23, sock=a)
    b.close()
    assert client.receive() is None
    assert client.connected is False


def test_send_without_connection_raises():
    client = TelnetClient("localhost", 23)
    with pytest.raises(ConnectionError):
        client.send_text("abc")


def test_connect_to_listening_server():
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(1)
    port = server.getsockname()[1]
    try:
        with TelnetClient("127.0.0.1", port) as client:
            peer, _ = server.accept()
            with peer:
                peer.settimeout(5)
                client.send_text("ping")
                assert peer.recv(16) == b"ping"
                peer.sendall(b"pong")
                assert client.receive() == "pong"
        assert client.connected is False
    finally:
        server.close()


def test_main_reports_refused_connection():
    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    assert main(["127.0.0.1", str(port)]) == 1