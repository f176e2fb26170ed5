"""Short-format status parser.

Handles the ``XY PATH`` and ``XY FROM -> TO`` forms of ``git status
--short`` / ``--porcelain`` output, CRLF line endings and C-style quoted
paths.
"""

from __future__ import annotations

from typing import Generator

from semcommit.git.models import MalformedLine, Status

RENAME_ARROW = " -> "


class ParseError(ValueError):
    """Raised when a status line does not have the ``XY PATH`` shape."""

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"{reason}: {line!r}")
        self.line = line
        self.reason = reason


_ESCAPES = {
    "a": b"\a",
    "b": b"\b",
    "t": b"\t",
    "n": b"\n",
    "v": b"\v",
    "f": b"\f",
    "r": b"\r",
    '"': b'"',
    "\\": b"\\",
}


def _unquote(path: str) -> str:
    """Undo git's C-style quoting of paths with special characters."""
    if len(path) < 2 or not (path.startswith('"') and path.endswith('"')):
        return path

    body = path[1:-1]
    out = bytearray()
    idx = 0
    while idx < len(body):
        ch = body[idx]
        if ch != "\\" or idx + 1 == len(body):
            out += ch.encode("utf-8")
            idx += 1
            continue
        nxt = body[idx + 1]
        octal = body[idx + 1:idx + 4]
        if len(octal) == 3 and all(c in "01234567" for c in octal):
            # Non-ASCII bytes are written as octal escapes of their UTF-8 encoding
            out.append(int(octal, 8) & 0xFF)
            idx += 4
        elif nxt in _ESCAPES:
            out += _ESCAPES[nxt]
            idx += 2
        else:
            out += ch.encode("utf-8")
            idx += 1
    return out.decode("utf-8", errors="replace")


def parse_status(line: str) -> Status:
    """Parse one status line into a Status. Raises ParseError."""
    line = line.rstrip("\r\n")
    if len(line) < 3:
        raise ParseError(line, "line too short for a status code")
    if line[2] != " ":
        raise ParseError(line, "missing space after status code")

    x, y, payload = line[0], line[1], line[3:]
    if not payload:
        raise ParseError(line, "missing path")

    parts = _split_arrow(line, payload)
    if len(parts) == 1:
        return Status(x=x, y=y, to=_unquote(payload))
    if len(parts) != 2 or not all(parts):
        raise ParseError(line, "rename must have exactly two paths")
    return Status(x=x, y=y, to=_unquote(parts[1]), from_=_unquote(parts[0]))


def _split_arrow(line: str, payload: str) -> list[str]:
    """Split *payload* on rename arrows that sit outside quoted paths."""
    parts: list[str] = []
    start = 0
    idx = 0
    in_quotes = False
    while idx < len(payload):
        ch = payload[idx]
        if in_quotes:
            if ch == "\\":
                idx += 2
                continue
            if ch == '"':
                in_quotes = False
        elif ch == '"':
            in_quotes = True
        elif payload.startswith(RENAME_ARROW, idx):
            parts.append(payload[start:idx])
            idx += len(RENAME_ARROW)
            start = idx
            continue
        idx += 1

    if in_quotes:
        raise ParseError(line, "unterminated quoted path")
    parts.append(payload[start:])
    return parts


class StatusParser:
    """Parse a whole status listing into Status / MalformedLine items.

    Usage::

        for item in StatusParser(status_text).parse():
            if isinstance(item, MalformedLine):
                ...
            else:
                ...

    Empty lines produce nothing, so an empty listing yields no items.
    Lines holding only spaces are reported as malformed.
    """

    def __init__(self, status_text: str) -> None:
        self._lines = status_text.splitlines()

    def parse(self) -> Generator[Status | MalformedLine, None, None]:
        for line_no, raw_line in enumerate(self._lines, start=1):
            if not raw_line:
                continue
            try:
                yield parse_status(raw_line)
            except ParseError as exc:
                yield MalformedLine(line_no=line_no, line=exc.line, reason=exc.reason)
