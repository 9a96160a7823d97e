"""INI-style configuration files with integer, floating point and string values."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Union

Value = Union[str, int, float]

_BLANKS = frozenset(" \t")
_QUOTES = frozenset("'\"")
_COMMENTS = frozenset(";#")
_KEY_STOP = frozenset({"=", "", ";", "#"})
_VALUE_STOP = frozenset({"", ";", "#"})
_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class ValueType(Enum):
    """Kind of value stored under a key."""

    INTEGER = "integer"
    STRING = "string"
    DOUBLE = "double"


@dataclass
class Entry:
    """A single ``key = value`` pair."""

    key: str
    type: ValueType
    value: Value


@dataclass
class Section:
    """A ``[title]`` section and the entries that follow it."""

    title: str
    entries: list[Entry] = field(default_factory=list)


@dataclass
class Config:
    """Parsed configuration: sections in file order plus per-line problems."""

    sections: list[Section] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def get(self, section, key, default=None):
        """Return the most recently defined value of ``key`` in ``section``."""
        for candidate in reversed(self.sections):
            if candidate.title != section:
                continue
            for entry in reversed(candidate.entries):
                if entry.key == key:
                    return entry.value
        return default

    def format(self):
        """Render the configuration, newest sections and entries first."""
        lines = []
        for section in reversed(self.sections):
            lines.append(f"[{section.title}]")
            for entry in reversed(section.entries):
                lines.append(f"  {entry.key} = {_format_value(entry)}")
        return "".join(f"{line}\n" for line in lines)


class _LineError(Exception):
    """A problem that makes one configuration line unusable."""


def _format_value(entry: Entry) -> str:
    if entry.type is ValueType.STRING:
        return f"'{entry.value}'"
    if entry.type is ValueType.INTEGER:
        return str(entry.value)
    return "%g" % entry.value


def _parse_line(line: str, in_section: bool) -> Section | Entry | None:
    size = len(line)

    def at(index: int) -> str:
        return line[index] if index < size else ""

    i = 0
    while at(i) in _BLANKS:
        i += 1
    first = at(i)
    if first == "" or first in _COMMENTS:
        return None

    if first == "[":
        i += 1
        start = i
        while at(i) not in ("]", "") and at(i) not in _BLANKS:
            i += 1
        if at(i) in _BLANKS:
            raise _LineError("Space characters not allowed within section name")
        if at(i) != "]":
            raise _LineError("Missing closing bracket for section")
        return Section(line[start:i])

    if not in_section:
        raise _LineError("Key-value pair outside of any section")

    key_start = i
    spaces = 0
    while (char := at(i)) not in _KEY_STOP:
        if char in _QUOTES:
            raise _LineError("Unexpected quote symbol within key string")
        if char != " " and spaces:
            raise _LineError("Unexpected spacing characters within key string")
        spaces = spaces + 1 if char in _BLANKS else 0
        i += 1
    if at(i) != "=":
        raise _LineError("No value specified")
    key = line[key_start:i - spaces]

    i += 1
    while at(i) in _BLANKS:
        i += 1
    quote = at(i) if at(i) in _QUOTES else None
    if quote:
        i += 1

    value_start = i
    dotted = False
    while (char := at(i)) not in _VALUE_STOP:
        if quote and char == quote:
            break
        if char == ".":
            if not quote and dotted:
                raise _LineError("Invalid floating point expression")
            dotted = True
        i += 1
    raw = line[value_start:i]

    if quote:
        for char in line[i + 1:]:
            if char in _COMMENTS:
                break
            if char not in _BLANKS:
                raise _LineError("Unexpected character after string value")
        return Entry(key, ValueType.STRING, raw)

    raw = raw.rstrip(" \t")
    if dotted:
        if not _FLOAT_RE.fullmatch(raw):
            raise _LineError("Value parsing failed")
        return Entry(key, ValueType.DOUBLE, float(raw))
    if not _INT_RE.fullmatch(raw):
        raise _LineError("Value parsing failed")
    return Entry(key, ValueType.INTEGER, int(raw))


def parse_config_text(text):
    """Parse configuration text; unusable lines are recorded in ``errors``."""
    config = Config()
    for number, line in enumerate(text.split("\n"), start=1):
        try:
            item = _parse_line(line, bool(config.sections))
        except _LineError as exc:
            config.errors.append(f"Line {number}: {exc}")
            continue
        if isinstance(item, Section):
            config.sections.append(item)
        elif isinstance(item, Entry):
            config.sections[-1].entries.append(item)
    return config


def load_config(path):
    """Read and parse the configuration file at ``path``."""
    return parse_config_text(Path(path).read_text(encoding="utf-8"))


def main(argv=None):
    """Parse a configuration file and print what was understood."""
    parser = argparse.ArgumentParser(description="Parse and print a configuration file.")
    parser.add_argument("path", nargs="?", default="temp.ini")
    args = parser.parse_args(argv)
    try:
        config = load_config(args.path)
    except OSError as exc:
        print(f"Failed to open file: {exc.strerror or exc}", file=sys.stderr)
        return 1
    for error in config.errors:
        print(error)
    print(config.format(), end="")
    return 0