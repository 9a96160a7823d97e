# liveserve

A small HTTP server for local development, together with a strict reader
for INI-style configuration files. It has no dependencies outside the
standard library.

## Installation

```
pip install .
```

## Running the server

```
liveserve [path] [--host HOST] [--port PORT]
```

By default the server listens on `127.0.0.1:5050`. It serves one client at
a time: for each connection it logs the client's address with a timestamp,
reads up to 1023 bytes, takes the first line as the request line
(`METHOD target VERSION`) and answers with a status line such as
`HTTP/1.1 200 OK` followed by the body `Hello world`. A request whose first
line cannot be parsed is logged as ignored and the connection is closed
without an answer. Stop the server with Ctrl+C.

From Python, `liveserve.server.Server` can be started and stopped
explicitly, or used as a context manager:

```python
from liveserve.server import Server

with Server(host="127.0.0.1", port=0) as server:
    print(server.port)  # the port actually bound
    server.run()        # serves until server.stop() is called
```

`Server.start()` raises `OSError` if the address cannot be bound, and
`Server.run()` raises `RuntimeError` if the server was not started.
`Server.handle_client(conn, address)` serves a single accepted connection.

Helpers in the same module:

- `reason_phrase(code)` returns `"OK"` for 200 and `"Not Found"` for 404,
  and raises `ValueError` for any other code.
- `format_response(response)` encodes an `HttpResponse` as the bytes sent
  to the client.

### What the server does not do

The server does not yet serve files: the `path` argument is accepted and
stored on the `Server`, but responses never read from it. Every request that
parses gets `200 OK` with the body `Hello world`, whatever its method or
path. Request headers and bodies are not read, query strings are kept as
raw text and not split into arguments, and there is no watching of the
directory for changes.

## Requests and responses

```python
from liveserve.parser import parse_request_line

request = parse_request_line("GET /index.html?lang=en HTTP/1.1")
request.method        # "GET"
request.uri.path      # "/index.html"
request.uri.query     # "lang=en"
request.http_version  # "HTTP/1.1"
request.method_kind   # HttpMethod.GET, or None for unknown methods
```

`parse_request_line` raises `RequestParseError` (a `ValueError`) when the
line has fewer than three space-separated parts. `parse_request_uri(s)`
splits a target on the first `?`.

`liveserve.handler.handle_request(request)` builds an `HttpResponse` with
the request's HTTP version and code 200, and `stringify(response)` renders
its status line with `Server` and `Content-Type` headers.

## Reading configuration files

Configuration files are made of `[sections]` holding `key = value` lines.
Values may be integers, floating-point numbers (any value containing a
`.`), or strings in single or double quotes. Lines starting with `#` or
`;` are comments, and a `#` or `;` also ends a value.

```ini
[server]
host = "127.0.0.1"
port = 5050
timeout = 2.5
```

The reader is strict. Section names may not contain spaces, keys may not
contain spaces or quotes, a key needs an `=`, numbers must parse completely,
nothing but blanks may follow a closing quote, and key-value lines must come
after a section header. Such lines are skipped and described in
`config.errors`, as `"Line N: ..."`.

To check a file and print what was read from it:

```
liveserve-config settings.ini
```

Without an argument it reads `temp.ini`. It prints any line errors, then
the sections and entries, most recently defined first. If the file cannot
be opened it prints `Failed to open file` and exits with status 1.

From Python:

```python
from liveserve.config import load_config, parse_config_text

config = load_config("settings.ini")          # raises OSError if unreadable
port = config.get("server", "port", 8080)     # latest definition wins
print(config.format())

config = parse_config_text("[app]\nname = 'demo'\n")
config.sections[0].entries[0].value           # "demo"
```

Each `Section` has a `title` and a list of `Entry` objects, each with a
`key`, a `type` (`ValueType.INTEGER`, `ValueType.DOUBLE` or
`ValueType.STRING`) and a `value`.

## Utilities

`liveserve.utils.get_version()` returns `"1.0.0"`, and
`get_log_time(now=None)` formats a timestamp such as `Mon Jan  1 12:00:00`
for log lines.

## Running the tests

```
pip install .[test]
pytest
```