"""Version and timestamp helpers."""

from __future__ import annotations

from datetime import datetime

MAJOR_VERSION = 1
MINOR_VERSION = 0
PATCHLEVEL = 0


def get_version():
    """Return the server version as ``major.minor.patch``."""
    return f"{MAJOR_VERSION}.{MINOR_VERSION}.{PATCHLEVEL}"


def get_log_time(now=None):
    """Format a timestamp for log lines, e.g. ``Mon Jan  1 12:00:00``."""
    moment = now if now is not None else datetime.now()
    return f"{moment:%a %b} {moment.day:2d} {moment:%H:%M:%S}"