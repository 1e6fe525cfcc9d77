# tinyweb

A small blocking HTTP/1.1 server that answers one request per connection,
together with a matching command-line client. It has no dependencies
beyond the Python standard library.

## Routes

| Request                             | Response                                                        |
|-------------------------------------|-----------------------------------------------------------------|
| `GET /`                             | A fixed HTML page confirming the connection                     |
| `GET /hello`                        | A short HTML greeting                                           |
| `GET /index.html`                   | The contents of `index.html` from the static root, or a 404 page |
| `GET /time`                         | The current local time, `YYYY-MM-DD HH:MM:SS`                   |
| `GET /greet?name=..&age=..&lang=..` | An HTML greeting built from the query string                    |
| `PUT /upload/<filename>`            | Stores the request body in the upload directory, `201 Created`  |
| anything else                       | `404 Not Found`                                                 |

Only `PUT /upload/...` looks at the method; every other route answers
whatever the method is.

The greeting form falls back to `Guest`, `N/A` and `en` for any missing
field. Pairs that are not `key=value` and unknown keys are ignored, and a
value is taken up to its first whitespace, at most 127 characters. Values
are not URL-decoded or HTML-escaped.

Upload filenames have every `/` and `\` replaced with `_` and are cut to
255 characters, so an upload stays in the upload directory. At most
`Content-Length` bytes of the body are written, with owner-only
permissions. If the file cannot be created (for example because the
upload directory does not exist), the server answers
`500 Internal Server Error`.

Each request is logged to standard output with the client's IP address
and the raw request text.

## Installation

```
pip install .
```

## Running the server

```
tinyweb-server
```

By default the server listens on port 8080 on all interfaces, stores
uploads in `uploads` and serves `index.html` from the current directory.
Create the `uploads` directory yourself if you want `PUT` uploads to
work. The options are:

- `--host` – address to listen on (default `0.0.0.0`)
- `--port` – port to listen on (default `8080`)
- `--upload-dir` – directory for `PUT` uploads (default `uploads`)
- `--static-root` – directory holding `index.html` (default `.`)

If the server cannot start, for instance because the port is taken, it
prints the error and exits with status 1. Stop it with Ctrl-C.

## Using the client

```
tinyweb-client
```

The client sends one `GET` request and prints both the request it sent
and the start of the reply (at most 1023 bytes). Its options are
`--host` (default `127.0.0.1`), `--port` (default `8080`) and `--path`
(default `/`). It exits with status 1 if it cannot connect.

## Using it from Python

```python
from tinyweb.router import handle_request

raw = b"GET /greet?name=Ana&age=30 HTTP/1.1\r\nHost: localhost\r\n\r\n"
print(handle_request(raw, "uploads", ".").decode())
```

- `tinyweb.router` – `handle_request`, `parse_request_line` (returning a
  `RequestLine`), `handle_upload` and `safe_upload_name`.
- `tinyweb.responses` – builds the individual responses as bytes:
  `html_response`, `fixed_response`, `hello_response`,
  `not_found_response`, `time_response`, `static_file_response` and
  `form_response`; `parse_greeting` returns a `Greeting`.
- `tinyweb.server` – `create_server`, `handle_client` and `serve`.
- `tinyweb.client` – `build_request` and `fetch`, which sends a request
  and returns the start of the reply.
- `tinyweb.logger` – `log_request`.

## Limits

The server handles one connection at a time and reads a single chunk of
at most 4095 bytes from each; a request, including any upload body,
longer than that is cut short. There is no keep-alive, no chunked
transfer encoding, no MIME type detection (everything is served as
`text/html`) and no static file other than `index.html`.

## Tests

```
pip install .[test]
pytest
```