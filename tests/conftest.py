"""Shared test fixtures: sample status listings and temp git repos."""

from __future__ import annotations

import subprocess
import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def sample_status_mixed() -> str:
    """Porcelain output touching chore, docs, test and plain source files."""
    return textwrap.dedent("""\
        M  package.json
        A  docs/intro.md
         M src/test/foo.test.ts
        ?? src/generate/paths.ts
    """)


@pytest.fixture
def sample_status_docs_only() -> str:
    """Every change is a documentation change."""
    return textwrap.dedent("""\
        M  README.md
        A  docs/guide/setup.md
        R  docs/old.md -> docs/new.md
    """)


@pytest.fixture
def sample_status_rename() -> str:
    """A rename into a different directory."""
    return "R  src/old/name.py -> src/new/name.py\n"


@pytest.fixture
def sample_status_malformed() -> str:
    """One good line, one too short, one without the separating space."""
    return textwrap.dedent("""\
        A  foo.txt
        M
        MMfoo.txt
    """)


@pytest.fixture
def sample_status_crlf() -> str:
    """Windows line endings."""
    return "A  foo.txt\r\n M bar/baz.yml\r\n"


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository for integration tests."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    subprocess.run(
        ["git", "config", "user.email", "test@test.com"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    subprocess.run(
        ["git", "config", "user.name", "Test"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    # Initial commit
    readme = tmp_path / "README.md"
    readme.write_text("# Test\n")
    subprocess.run(["git", "add", "."], cwd=tmp_path, capture_output=True, check=True)
    subprocess.run(
        ["git", "commit", "-m", "init"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    return tmp_path
