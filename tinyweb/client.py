"""A minimal client that sends one GET request and prints the reply."""

from __future__ import annotations

import argparse
import socket
import sys

DEFAULT_PORT = 8080
BUFFER_SIZE = 1024


def build_request(host: str, path: str = "/") -> bytes:
    """The bytes of a GET request for ``path`` on ``host``."""
    return f"GET {path} HTTP/1.1\r\nHost: {host}\r\n\r\n".encode("utf-8")


def fetch(host: str, port: int = DEFAULT_PORT, path: str = "/") -> bytes:
    """Send a GET request and return the start of the reply.

    At most ``BUFFER_SIZE - 1`` bytes of the reply are returned.
    """
    limit = BUFFER_SIZE - 1
    with socket.create_connection((host, port)) as sock:
        sock.sendall(build_request(host, path))
        received = bytearray()
        while len(received) < limit:
            chunk = sock.recv(limit - len(received))
            if not chunk:
                break
            received += chunk
    return bytes(received)


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point; returns the exit status."""
    parser = argparse.ArgumentParser(prog="tinyweb-client", description="Send one GET request.")
    parser.add_argument("--host", default="127.0.0.1", help="server address")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="server port")
    parser.add_argument("--path", default="/", help="path to request")
    args = parser.parse_args(argv)

    request = build_request(args.host, args.path)
    try:
        reply = fetch(args.host, args.port, args.path)
    except OSError as exc:
        print(f"Failed to connect to server: {exc}", file=sys.stderr)
        return 1
    print(f"HTTP request sent:\n{request.decode('utf-8')}")
    print(f"Server response:\n{reply.decode('utf-8', 'replace')}")
    return 0


if __name__ == "__main__":
    sys.exit(main())