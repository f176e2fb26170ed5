"""Semantic commit categories for changed paths.

Used to check whether every change in a commit is a ``chore``, ``docs``
or ``test`` change. The checks are heuristics over the path text only.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from semcommit.paths import split_path
from semcommit.semantic.rules import DEFAULT_RULES, ClassificationRules, normalise_extension


class Category(str, Enum):
    CHORE = "chore"
    DOCS = "docs"
    TEST = "test"
    NONE = ""


@dataclass(frozen=True)
class Semantic:
    """Classification context for one path."""

    filepath: str
    dir: str
    name: str
    extension: str
    rules: ClassificationRules = DEFAULT_RULES

    @classmethod
    def from_path(cls, filepath: str, rules: ClassificationRules = DEFAULT_RULES) -> "Semantic":
        parts = split_path(filepath)
        return cls(
            filepath=filepath,
            dir=parts.dir,
            name=parts.name,
            extension=parts.extension,
            rules=rules,
        )

    def is_doc_related(self) -> bool:
        """README files, and everything under the docs directory.

        For static sites not every .md file is a doc, so extensions are not
        considered. By default the docs check is a plain string prefix, which
        also matches names like ``docsomething.txt``; ``strict_docs`` limits
        it to the first path segment.
        """
        if self.name in self.rules.doc_names:
            return True
        if self.rules.strict_docs:
            return self.filepath.split("/", 1)[0] == self.rules.docs_prefix
        return self.filepath.startswith(self.rules.docs_prefix)

    def is_test_related(self) -> bool:
        return (
            ".test." in self.name
            or "test/" in self.filepath
            or self.name.startswith("test_")
        )

    def is_config_related(self) -> bool:
        return normalise_extension(self.extension) in self.rules.config_extensions

    def is_package_related(self) -> bool:
        return self.name in self.rules.package_files

    def get_type(self) -> Category:
        # Package and config files win over docs and tests
        if self.is_package_related() or self.is_config_related():
            return Category.CHORE
        if self.is_doc_related():
            return Category.DOCS
        if self.is_test_related():
            return Category.TEST
        return Category.NONE


def classify(filepath: str, rules: ClassificationRules = DEFAULT_RULES) -> Category:
    """Return the semantic category of *filepath*."""
    return Semantic.from_path(filepath, rules).get_type()
