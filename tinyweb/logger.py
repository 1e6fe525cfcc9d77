"""Request logging."""

from __future__ import annotations

import sys
from typing import TextIO


def log_request(client_ip: str, request: str | bytes, stream: TextIO | None = None) -> None:
    """Write the client address and the raw request text to ``stream``.

    ``stream`` defaults to standard output.
    """
    out = sys.stdout if stream is None else stream
    if isinstance(request, bytes):
        request = request.decode("utf-8", "replace")
    out.write(f"Client IP: {client_ip}\n")
    out.write(f"Request:\n{request}\n")
    out.flush()