"""Data models for short-format status parsing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StatusCode(str, Enum):
    UNMODIFIED = " "
    MODIFIED = "M"
    TYPE_CHANGED = "T"
    ADDED = "A"
    DELETED = "D"
    RENAMED = "R"
    COPIED = "C"
    UNMERGED = "U"
    UNTRACKED = "?"
    IGNORED = "!"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    StatusCode.UNMODIFIED: "unmodified",
    StatusCode.MODIFIED: "modified",
    StatusCode.TYPE_CHANGED: "type changed",
    StatusCode.ADDED: "added",
    StatusCode.DELETED: "deleted",
    StatusCode.RENAMED: "renamed",
    StatusCode.COPIED: "copied",
    StatusCode.UNMERGED: "unmerged",
    StatusCode.UNTRACKED: "untracked",
    StatusCode.IGNORED: "ignored",
}


def describe_code(code: str) -> str:
    """Return a label for a single status character, or the raw code."""
    try:
        return StatusCode(code).label
    except ValueError:
        return code


@dataclass(frozen=True)
class Status:
    """One change record from ``git status --short``.

    ``x`` is the index slot, ``y`` the working tree slot. ``from_`` is only
    set for renames and copies.
    """

    x: str
    y: str
    to: str
    from_: str = ""

    @property
    def is_rename(self) -> bool:
        return bool(self.from_)

    @property
    def is_untracked(self) -> bool:
        return self.x == StatusCode.UNTRACKED.value and self.y == StatusCode.UNTRACKED.value

    @property
    def paths(self) -> list[str]:
        return [p for p in (self.from_, self.to) if p]

    def describe(self) -> str:
        """Human label for the change, preferring the index slot."""
        if self.is_untracked:
            return StatusCode.UNTRACKED.label
        code = self.x if self.x != " " else self.y
        return describe_code(code)


@dataclass(frozen=True)
class MalformedLine:
    """A status line that could not be parsed."""

    line_no: int
    line: str
    reason: str
