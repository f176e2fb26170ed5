"""semcommit: classify changed files into semantic commit categories."""

__version__ = "0.1.0"
