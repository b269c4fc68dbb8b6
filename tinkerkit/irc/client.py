"""A minimal IRC client that logs in, answers pings and echoes traffic."""

from __future__ import annotations

import re
import socket
import sys
from typing import Sequence

MAX_DATA_SIZE = 512
DEFAULT_NICK = "MyIRCClient"
DEFAULT_USER = "IRCClient"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class IRCClient:
    """An IRC connection over a TCP socket."""

    REALNAME = "IRC Client"

    def __init__(self, connection: socket.socket | None = None) -> None:
        self._sock = connection

    @property
    def connected(self) -> bool:
        return self._sock is not None

    def connect(self, host: str, port: int) -> None:
        """Open a TCP connection; raises OSError if that fails."""
        sock = socket.create_connection((host, port))
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self._sock = sock

    def _close(self) -> None:
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def disconnect(self) -> None:
        """Send QUIT and close the connection."""
        if self._sock is None:
            return
        try:
            self.send("QUIT")
        except OSError:
            pass
        finally:
            self._close()

    def send(self, data: str) -> None:
        """Send one line; does nothing when not connected."""
        if self._sock is None:
            return
        self._sock.sendall((data + "\n").encode("utf-8"))

    def login(self, nick: str, user: str) -> None:
        """Register with the server under ``nick`` and ``user``."""
        self.send("HELLO")
        self.send(f"NICK {nick}")
        self.send(f"USER {user} 0 * :{self.REALNAME}")

    def receive(self) -> list[str]:
        """Read one chunk from the server, handle its lines and return them."""
        if self._sock is None:
            return []
        try:
            chunk = self._sock.recv(MAX_DATA_SIZE - 1)
        except OSError as exc:
            print(f"recv failed with error: {exc}")
            self._close()
            return []
        if not chunk:
            print("Connection closed.")
            self._close()
            return []
        print(f"Bytes received: {len(chunk)}")
        text = chunk.split(b"\0", 1)[0].decode("utf-8", "replace")
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        for line in lines:
            self.parse(line)
        return lines

    def parse(self, line: str) -> None:
        """React to one server line: quit on ERROR, answer PING, echo the rest."""
        if line.startswith("ERROR"):
            self.disconnect()
            return
        if line.startswith("PING"):
            self.send("PONG" + line[4:])
        print(line)


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Connect to ``host port``, log in and echo traffic until interrupted."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("Insufficient parameters: host port")
        return 1
    host, port = args[0], _atoi(args[1])

    client = IRCClient()
    print("Connecting...")
    try:
        client.connect(host, port)
    except socket.gaierror:
        print(f"Could not resolve host: {host}")
        return 1
    except OSError:
        print(f"Could not connect to: {host}")
        return 1

    print("Connected. Logging in...")
    try:
        client.login(DEFAULT_NICK, DEFAULT_USER)
        print("Logged.")
        while client.connected:
            client.receive()
    except KeyboardInterrupt:
        pass
    except OSError as exc:
        print(f"Connection error: {exc}")
    finally:
        client.disconnect()
    print("Disconnected.")
    return 0