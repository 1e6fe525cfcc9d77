import re
from datetime import datetime

import pytest

from tinyweb.responses import (
    Greeting,
    fixed_response,
    form_response,
    hello_response,
    html_response,
    not_found_response,
    parse_greeting,
    static_file_response,
    time_response,
)


def split(response):
    head, sep, body = response.partition(b"\r\n\r\n")
    assert sep == b"\r\n\r\n"
    lines = head.split(b"\r\n")
    headers = dict(line.split(b": ", 1) for line in lines[1:])
    return lines[0], headers, body


def test_fixed_response_wire_bytes():
    body = b"<html><body><h1>You connected well to the server!</h1></body></html>"
    expected = (
        b"HTTP/1.1 200 OK\r\n"
        b"Content-Type: text/html; charset=UTF-8\r\n"
        b"Content-Length: " + str(len(body)).encode() + b"\r\n"
        b"\r\n" + body
    )
    assert fixed_response() == expected


def test_hello_response():
    status, headers, body = split(hello_response())
    assert status == b"HTTP/1.1 200 OK"
    assert body == b"<html><body><h1>Hello, User!</h1></body></html>"
    assert int(headers[b"Content-Length"]) == len(body)


def test_not_found_response():
    status, headers, body = split(not_found_response())
    assert status == b"HTTP/1.1 404 Not Found"
    assert body == b"<html><body><h1>404 - Page Not Found</h1></body></html>"
    assert headers[b"Content-Type"] == b"text/html; charset=UTF-8"


def test_html_response_length_counts_bytes():
    status, headers, body = split(html_response("200 OK", "héllo"))
    assert body == "héllo".encode("utf-8")
    assert int(headers[b"Content-Length"]) == len(body)


def test_html_response_accepts_bytes():
    status, headers, body = split(html_response("201 Created", b"<p>x</p>"))
    assert status == b"HTTP/1.1 201 Created"
    assert body == b"<p>x</p>"


def test_time_response_given_moment():
    status, headers, body = split(time_response(datetime(2024, 1, 2, 3, 4, 5)))
    assert status == b"HTTP/1.1 200 OK"
    assert headers[b"Content-Type"] == b"text/html"
    assert b"Current time: 2024-01-02 03:04:05" in body
    assert int(headers[b"Content-Length"]) == len(body)


def test_time_response_default_is_now():
    _, _, body = split(time_response())
    match = re.search(rb"Current time: (\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})", body)
    assert match
    stamp = datetime.strptime(match.group(1).decode(), "%Y-%m-%d %H:%M:%S")
    assert abs((datetime.now() - stamp).total_seconds()) < 60


def test_static_file_served(tmp_path):
    page = tmp_path / "index.html"
    page.write_bytes(b"<html>static</html>")
    status, headers, body = split(static_file_response(page))
    assert status == b"HTTP/1.1 200 OK"
    assert headers[b"Content-Type"] == b"text/html"
    assert body == b"<html>static</html>"
    assert int(headers[b"Content-Length"]) == len(body)


def test_static_file_missing(tmp_path):
    status, headers, body = split(static_file_response(tmp_path / "absent.html"))
    assert status == b"HTTP/1.1 404 Not Found"
    assert body == b"<html><body><h1>404 - File Not Found</h1></body></html>"
    assert int(headers[b"Content-Length"]) == len(body)


def test_parse_greeting_defaults():
    assert parse_greeting("/greet?") == Greeting("Guest", "N/A", "en")
    assert parse_greeting("/greet") == Greeting()


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/greet?name=John", Greeting(name="John")),
        ("/greet?name=Kim&age=30&lang=ko", Greeting("Kim", "30", "ko")),
        ("/greet?&&name=Lee&&", Greeting(name="Lee")),
        ("/greet?name=&age=5", Greeting(age="5")),
        ("/greet?=x&lang=fr", Greeting(lang="fr")),
        ("/greet?name=a=b", Greeting(name="a=b")),
        ("/greet?color=red&name=Ann", Greeting(name="Ann")),
        ("/greet?name=first&name=second", Greeting(name="second")),
    ],
)
def test_parse_greeting_cases(path, expected):
    assert parse_greeting(path) == expected


def test_parse_greeting_value_stops_at_whitespace():
    assert parse_greeting("/greet?name=  Jo hn").name == "Jo"


def test_parse_greeting_truncates_long_value():
    value = "v" * 200
    assert parse_greeting("/greet?name=" + value).name == value[:127]


def test_parse_greeting_rejects_overlong_key():
    assert parse_greeting("/greet?" + "k" * 64 + "=1") == Greeting()


def test_form_response_body():
    status, headers, body = split(form_response("/greet?name=John&age=41"))
    assert status == b"HTTP/1.1 200 OK"
    assert b"<h1>Hello, John!</h1>" in body
    assert b"<p>Age: 41</p>" in body
    assert b"<p>Language: en</p>" in body
    assert body.startswith(b"<!DOCTYPE html>")
    assert int(headers[b"Content-Length"]) == len(body)