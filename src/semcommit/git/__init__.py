"""Git interface layer: adapter, status parsing, models."""

from semcommit.git.adapter import GitError, get_repo_root, get_status_output
from semcommit.git.models import MalformedLine, Status, StatusCode, describe_code
from semcommit.git.status_parser import ParseError, StatusParser, parse_status

__all__ = [
    "GitError",
    "MalformedLine",
    "ParseError",
    "Status",
    "StatusCode",
    "StatusParser",
    "describe_code",
    "get_repo_root",
    "get_status_output",
    "parse_status",
]
