"""Turning parsed requests into responses."""

from __future__ import annotations

from dataclasses import dataclass

from .parser import HttpRequest


@dataclass
class HttpResponse:
    """Status and payload of a response."""

    http_version: str
    code: int = 200
    content_type: str = "text/plain"
    body: bytes = b""


def handle_request(request: HttpRequest) -> HttpResponse:
    """Build the response for ``request``."""
    return HttpResponse(http_version=request.http_version, code=200)


def stringify(response: HttpResponse) -> str:
    """Render the status line and headers of ``response``."""
    return (
        f"{response.http_version} {response.code} OK\r\n"
        "Server: Live\r\n"
        f"Content-Type: {response.content_type}\r\n"
    )