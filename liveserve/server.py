"""A small TCP server answering HTTP requests."""

from __future__ import annotations

import argparse
import re
import socket
import threading

from .handler import HttpResponse, handle_request
from .parser import RequestParseError, parse_request_line
from .utils import get_log_time, get_version

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5050
BACKLOG = 10
READ_SIZE = 1023

_REASONS = {200: "OK", 404: "Not Found"}
_LINE_BREAKS = re.compile(r"[\r\n]+")
_POLL_INTERVAL = 0.2


def reason_phrase(code):
    """Return the reason phrase for a status code."""
    try:
        return _REASONS[code]
    except KeyError:
        raise ValueError(f"no reason phrase for status code {code}") from None


def format_response(response: HttpResponse) -> bytes:
    """Encode ``response`` as the bytes sent to the client."""
    status = f"{response.http_version} {response.code} {reason_phrase(response.code)}"
    return f"{status}\r\nHello world".encode("latin-1")


def _log(message: str) -> None:
    print(f"[{get_log_time()}] {message}", flush=True)


class Server:
    """Listening socket that serves one client at a time."""

    def __init__(self, host=DEFAULT_HOST, port=DEFAULT_PORT, path="."):
        self.host = host
        self.port = port
        self.path = path
        self._sock: socket.socket | None = None
        self._stopping = threading.Event()

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, *exc_info):
        self.stop()

    def start(self):
        """Bind and listen; raises OSError when the address is unavailable."""
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.bind((self.host, self.port))
            sock.listen(BACKLOG)
        except OSError:
            sock.close()
            raise
        self.port = sock.getsockname()[1]
        self._sock = sock
        self._stopping.clear()
        address = f"{self.host}:{self.port}"
        link = f"\x1b]8;;https://{address}/\x1b\\http://{address}\x1b]8;;\x1b\\"
        _log(f"Live server {get_version()} ({link}) started")

    def handle_client(self, conn, address):
        """Read one request from ``conn``, answer it and close the connection."""
        peer = f"{address[0]}:{address[1]}"
        with conn:
            _log(f"{peer} Accepted")
            try:
                data = conn.recv(READ_SIZE)
            except OSError as exc:
                print(f"read: {exc}", flush=True)
            else:
                self._respond(conn, data, peer)
            _log(f"{peer} Closing")

    def _respond(self, conn, data: bytes, peer: str) -> None:
        text = data.decode("latin-1")
        print(text, end="", flush=True)
        line = next((token for token in _LINE_BREAKS.split(text) if token), None)
        try:
            if line is None:
                raise RequestParseError("empty request")
            request = parse_request_line(line)
        except RequestParseError:
            print("bad request ignored for the moment.", flush=True)
            return
        conn.sendall(format_response(handle_request(request)))
        _log(f"{peer} {request.method} {request.uri.path}")

    def run(self):
        """Accept and serve clients until :meth:`stop` is called."""
        sock = self._sock
        if sock is None:
            raise RuntimeError("server is not started")
        sock.settimeout(_POLL_INTERVAL)
        while not self._stopping.is_set():
            try:
                conn, address = sock.accept()
            except TimeoutError:
                continue
            except OSError as exc:
                if self._stopping.is_set():
                    break
                print(f"accept: {exc}", flush=True)
                continue
            conn.settimeout(None)
            self.handle_client(conn, address)

    def stop(self):
        """Close the listening socket and end :meth:`run`."""
        self._stopping.set()
        if self._sock is not None:
            self._sock.close()
            self._sock = None
        _log("Server stopped")


def main(argv=None):
    """Start the server and serve until interrupted."""
    parser = argparse.ArgumentParser(description="Serve a directory over HTTP.")
    parser.add_argument("path", nargs="?", default=".")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    server = Server(args.host, args.port, args.path)
    server.start()
    try:
        server.run()
    except KeyboardInterrupt:
        pass
    finally:
        server.stop()
    return 0