"""Classify a whole status listing and summarise it."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from semcommit.git.models import MalformedLine, Status
from semcommit.paths import ROOT, common_path
from semcommit.semantic.classifier import Category, classify
from semcommit.semantic.rules import DEFAULT_RULES, ClassificationRules


@dataclass(frozen=True)
class ClassifiedChange:
    status: Status
    category: Category


@dataclass(frozen=True)
class ChangeSummary:
    """Classified changes plus the lines that failed to parse."""

    changes: List[ClassifiedChange] = field(default_factory=list)
    malformed: List[MalformedLine] = field(default_factory=list)
    common_dir: str = ROOT

    @property
    def counts(self) -> Dict[Category, int]:
        return dict(Counter(c.category for c in self.changes))

    @property
    def category(self) -> Category:
        """The category shared by every change, or NONE when they differ."""
        categories = {c.category for c in self.changes}
        if len(categories) == 1:
            return categories.pop()
        return Category.NONE

    @property
    def is_empty(self) -> bool:
        return not self.changes and not self.malformed


def summarize(
    items: Iterable[Status | MalformedLine],
    rules: ClassificationRules = DEFAULT_RULES,
) -> ChangeSummary:
    """Classify every Status in *items* by its destination path."""
    changes: List[ClassifiedChange] = []
    malformed: List[MalformedLine] = []
    all_paths: List[str] = []

    for item in items:
        if isinstance(item, MalformedLine):
            malformed.append(item)
            continue
        changes.append(ClassifiedChange(status=item, category=classify(item.to, rules)))
        all_paths.extend(item.paths)

    return ChangeSummary(
        changes=changes,
        malformed=malformed,
        common_dir=common_path(all_paths),
    )
