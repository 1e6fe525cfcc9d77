"""Builders for the HTTP responses the server sends."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from os import PathLike

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"

FIXED_BODY = "<html><body><h1>You connected well to the server!</h1></body></html>"
HELLO_BODY = "<html><body><h1>Hello, User!</h1></body></html>"
PAGE_NOT_FOUND_BODY = "<html><body><h1>404 - Page Not Found</h1></body></html>"
FILE_NOT_FOUND_BODY = "<html><body><h1>404 - File Not Found</h1></body></html>"

_HTML_UTF8 = "text/html; charset=UTF-8"
_HTML = "text/html"

_QUERY_LIMIT = 511
_WS = " \t\n\v\f\r"
_PAIR = re.compile(rf"([^=]{{1,63}})=[{_WS}]*([^{_WS}]{{1,127}})")
_GREETING_KEYS = frozenset({"name", "age", "lang"})


def _encode(text: str | bytes) -> bytes:
    if isinstance(text, bytes):
        return text
    return text.encode(_ENCODING, _ERRORS)


def _response(status: str, content_type: str, body: bytes) -> bytes:
    head = (
        f"HTTP/1.1 {status}\r\n"
        f"Content-Type: {content_type}\r\n"
        f"Content-Length: {len(body)}\r\n"
        "\r\n"
    )
    return head.encode("ascii") + body


def html_response(status: str, body: str | bytes) -> bytes:
    """Build a complete UTF-8 HTML response with the given status line text."""
    return _response(status, _HTML_UTF8, _encode(body))


def fixed_response() -> bytes:
    """The response for the root page."""
    return html_response("200 OK", FIXED_BODY)


def hello_response() -> bytes:
    """The response for ``/hello``."""
    return html_response("200 OK", HELLO_BODY)


def not_found_response() -> bytes:
    """The response for an unknown path."""
    return html_response("404 Not Found", PAGE_NOT_FOUND_BODY)


def time_response(now: datetime | None = None) -> bytes:
    """A page showing the local time, ``now`` by default being the current time."""
    moment = datetime.now() if now is None else now
    stamp = moment.strftime("%Y-%m-%d %H:%M:%S")
    body = f"<html><body><h1>Current time: {stamp}</h1></body></html>"
    return _response("200 OK", _HTML, _encode(body))


def static_file_response(path: str | PathLike[str]) -> bytes:
    """Serve the file at ``path`` as HTML, or a 404 page if it cannot be read."""
    try:
        with open(path, "rb") as handle:
            content = handle.read()
    except OSError:
        return html_response("404 Not Found", FILE_NOT_FOUND_BODY)
    return _response("200 OK", _HTML, content)


@dataclass(frozen=True)
class Greeting:
    """Values taken from the ``/greet`` query string."""

    name: str = "Guest"
    age: str = "N/A"
    lang: str = "en"


def parse_greeting(path: str) -> Greeting:
    """Read ``name``, ``age`` and ``lang`` from the query part of ``path``.

    Pairs that are not of the form ``key=value`` are ignored, as are unknown
    keys; values are taken up to the first whitespace, at most 127 characters.
    """
    _, sep, query = path.partition("?")
    query = query[:_QUERY_LIMIT] if sep else ""
    fields: dict[str, str] = {}
    for token in filter(None, query.split("&")):
        match = _PAIR.match(token)
        if match and match.group(1) in _GREETING_KEYS:
            fields[match.group(1)] = match.group(2)
    return Greeting(**fields)


def _greeting_page(greeting: Greeting) -> str:
    return (
        "<!DOCTYPE html>"
        "<html>"
        "<head>"
        '<meta charset="UTF-8">'
        "</head>"
        "<body>"
        f"<h1>Hello, {greeting.name}!</h1>"
        f"<p>Age: {greeting.age}</p>"
        f"<p>Language: {greeting.lang}</p>"
        "</body></html>"
    )


def form_response(path: str) -> bytes:
    """The greeting page for a ``/greet?...`` request path."""
    return html_response("200 OK", _greeting_page(parse_greeting(path)))