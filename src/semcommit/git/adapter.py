"""Git subprocess wrapper: repo root and short-format status."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional


class GitError(Exception):
    """Raised when git is unavailable or returns an unexpected error."""


def _run_git(args: list[str], cwd: Path, timeout: int = 30) -> str:
    """Run a git command and return stdout. Raises GitError on failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")

    if result.returncode != 0:
        stderr = result.stderr.strip() or f"exit status {result.returncode}"
        raise GitError(f"git error: {stderr}")
    return result.stdout


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Return the root of the current git repository."""
    cwd = cwd or Path.cwd()
    out = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd)
    return Path(out.strip())


def get_status_output(repo_root: Path, *, untracked: bool = True) -> str:
    """Return ``git status --porcelain`` text for *repo_root*."""
    args = ["status", "--porcelain"]
    args.append("--untracked-files=all" if untracked else "--untracked-files=no")
    return _run_git(args, cwd=repo_root)
