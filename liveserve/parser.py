"""Parsing of HTTP request lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class HttpMethod(Enum):
    """Request methods the server knows by name."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    PATCH = "PATCH"
    CONNECT = "CONNECT"
    CREATE = "CREATE"


class RequestParseError(ValueError):
    """Raised when a request line cannot be understood."""


@dataclass(frozen=True)
class RequestURI:
    """Request target: the resource path and the raw query string."""

    path: str
    query: str = ""


@dataclass(frozen=True)
class HttpRequest:
    """The parts of an HTTP request line."""

    method: str
    uri: RequestURI
    http_version: str

    @property
    def method_kind(self) -> HttpMethod | None:
        try:
            return HttpMethod(self.method)
        except ValueError:
            return None


def parse_request_uri(s):
    """Split a request target into its path and query string."""
    path, _, query = s.partition("?")
    return RequestURI(path, query)


def parse_request_line(line):
    """Parse ``METHOD target VERSION`` into an :class:`HttpRequest`."""
    parts = line.split(" ")
    if len(parts) < 3:
        raise RequestParseError(f"malformed request line: {line!r}")
    return HttpRequest(parts[0], parse_request_uri(parts[1]), parts[2])