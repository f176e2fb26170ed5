"""Path helpers: common directory, base removal, path decomposition.

Everything here is lexical. Paths are never looked up on disk.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from itertools import takewhile
from pathlib import PurePosixPath
from typing import Iterable

# Human friendly description of the top-level directory, used in messages.
ROOT = "repo root"


@dataclass(frozen=True)
class SplitPath:
    """Parent directory, base name and extension of a single path."""

    is_at_repo_root: bool
    dir: str
    name: str
    extension: str


def _all_equal(components: tuple[str, ...]) -> bool:
    return all(c == components[0] for c in components)


def common_path(paths: Iterable[str], sep: str = "/") -> str:
    """Return the longest leading directory sequence shared by *paths*.

    Components are compared position by position and the match stops at
    the first mismatch or at the end of the shortest path. A single path
    is its own common path. With no shared leading component the result
    is ``ROOT``.
    """
    split = [p.split(sep) for p in paths]
    if not split:
        return ROOT

    shared = [column[0] for column in takewhile(_all_equal, zip(*split))]
    common = sep.join(shared)
    return common if common else ROOT


def remove_base(base: str, path: str) -> str:
    """Strip *base* from the front of *path*.

    The separator following *base* is kept, so ``remove_base("a/b", "a/b/c")``
    is ``"/c"``. A *base* that is not a prefix of *path* (``ROOT`` included)
    leaves *path* unchanged.
    """
    if not path.startswith(base):
        return path
    return path[len(base):]


def split_path(path: str) -> SplitPath:
    """Decompose *path* whether or not it exists."""
    pure = PurePosixPath(path)
    parent = str(pure.parent)
    is_at_repo_root = parent == "."

    return SplitPath(
        is_at_repo_root=is_at_repo_root,
        dir=ROOT if is_at_repo_root else parent,
        name=pure.name,
        extension=posixpath.splitext(pure.name)[1],
    )
