"""Dispatch of a raw request to the response for its path."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path

from tinyweb.responses import (
    fixed_response,
    form_response,
    hello_response,
    not_found_response,
    static_file_response,
    time_response,
)

log = logging.getLogger(__name__)

UPLOAD_PREFIX = "/upload/"
GREET_PREFIX = "/greet?"
CREATED = b"HTTP/1.1 201 Created\r\n\r\n"
SERVER_ERROR = b"HTTP/1.1 500 Internal Server Error\r\n\r\n"

_NAME_LIMIT = 255
_CONTENT_LENGTH = re.compile(rb"Content-Length:[ \t\n\v\f\r]*([+-]?\d+)")


@dataclass(frozen=True)
class RequestLine:
    """Method, target and protocol from the start of a request."""

    method: str = ""
    url: str = ""
    protocol: str = ""


def _as_text(request: str | bytes) -> str:
    if isinstance(request, bytes):
        return request.decode("utf-8", "surrogateescape")
    return request


def _as_bytes(request: str | bytes) -> bytes:
    if isinstance(request, str):
        return request.encode("utf-8", "surrogateescape")
    return request


def parse_request_line(request: str | bytes) -> RequestLine:
    """Take the first three whitespace-separated words of the request."""
    words = _as_text(request).split(maxsplit=3)[:3]
    return RequestLine(*words)


def safe_upload_name(raw_name: str) -> str:
    """Flatten path separators so an upload stays in its directory."""
    cleaned = raw_name.replace("/", "_").replace("\\", "_")
    return cleaned[:_NAME_LIMIT]


def _content_length(request: bytes) -> int:
    start = request.find(b"Content-Length:")
    if start < 0:
        return 0
    match = _CONTENT_LENGTH.match(request, start)
    return int(match.group(1)) if match else 0


def handle_upload(request: str | bytes, url: str, upload_dir: str | os.PathLike[str]) -> bytes:
    """Store the request body under ``upload_dir`` and return the response.

    The file name comes from the part of ``url`` after ``/upload/``; at most
    Content-Length bytes of the body are written.
    """
    raw = _as_bytes(request)
    length = _content_length(raw)
    _, sep, body = raw.partition(b"\r\n\r\n")
    data = body[: max(length, 0)] if sep else b""

    filename = safe_upload_name(url[len(UPLOAD_PREFIX):])
    target = os.path.join(os.fspath(upload_dir), filename)
    try:
        fd = os.open(target, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, 0o600)
    except OSError:
        return SERVER_ERROR
    with os.fdopen(fd, "wb") as handle:
        handle.write(data)
    return CREATED


def handle_request(
    request: str | bytes,
    upload_dir: str | os.PathLike[str] = "uploads",
    static_root: str | os.PathLike[str] = ".",
) -> bytes:
    """Return the full response for one raw request."""
    line = parse_request_line(request)
    log.debug("Method: %s, URL: %s, Protocol: %s", line.method, line.url, line.protocol)

    url = line.url
    if line.method == "PUT" and url.startswith(UPLOAD_PREFIX):
        return handle_upload(request, url, upload_dir)
    if url.startswith(GREET_PREFIX):
        return form_response(url)

    routes = {
        "/": fixed_response,
        "/hello": hello_response,
        "/index.html": lambda: static_file_response(Path(static_root) / "index.html"),
        "/time": time_response,
    }
    return routes.get(url, not_found_response)()