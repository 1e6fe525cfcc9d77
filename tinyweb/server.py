"""A small blocking HTTP server that answers one request per connection."""

from __future__ import annotations

import argparse
import logging
import os
import socket
import sys
from typing import TextIO

from tinyweb.logger import log_request
from tinyweb.router import handle_request

log = logging.getLogger(__name__)

DEFAULT_PORT = 8080
BUFFER_SIZE = 4096
BACKLOG = 10


def handle_client(
    conn: socket.socket,
    address: tuple,
    upload_dir: str | os.PathLike[str] = "uploads",
    static_root: str | os.PathLike[str] = ".",
    log_stream: TextIO | None = None,
) -> None:
    """Read one request from ``conn``, log it and send back the response.

    The connection is left open; closing it is up to the caller.
    """
    try:
        request = conn.recv(BUFFER_SIZE - 1)
    except OSError as exc:
        log.error("Failed to read request: %s", exc)
        return

    log_request(address[0], request, log_stream)
    conn.sendall(handle_request(request, upload_dir, static_root))


def create_server(host: str = "", port: int = DEFAULT_PORT) -> socket.socket:
    """Return a TCP socket bound to ``host``:``port`` and listening."""
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        server.bind((host, port))
        server.listen(BACKLOG)
    except OSError:
        server.close()
        raise
    return server


def serve(
    host: str = "",
    port: int = DEFAULT_PORT,
    upload_dir: str | os.PathLike[str] = "uploads",
    static_root: str | os.PathLike[str] = ".",
) -> None:
    """Accept connections forever, answering one request on each."""
    with create_server(host, port) as server:
        print(f"Web server running on port {server.getsockname()[1]}...", flush=True)
        while True:
            try:
                conn, address = server.accept()
            except OSError as exc:
                log.warning("Failed to accept connection: %s", exc)
                continue
            with conn:
                handle_client(conn, address, upload_dir, static_root)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tinyweb", description="Run the web server.")
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    parser.add_argument("--upload-dir", default="uploads", help="directory for PUT uploads")
    parser.add_argument("--static-root", default=".", help="directory holding index.html")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point; returns the exit status."""
    args = _parser().parse_args(argv)
    try:
        serve(args.host, args.port, args.upload_dir, args.static_root)
    except OSError as exc:
        print(f"Server failed to start: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())