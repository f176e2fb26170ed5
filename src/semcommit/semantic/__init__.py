"""Semantic classification: rules tables, classifier, summary."""

from semcommit.semantic.classifier import Category, Semantic, classify
from semcommit.semantic.rules import (
    DEFAULT_RULES,
    ClassificationRules,
    RulesError,
    build_rules,
    load_rules_file,
)
from semcommit.semantic.summary import ChangeSummary, ClassifiedChange, summarize

__all__ = [
    "DEFAULT_RULES",
    "Category",
    "ChangeSummary",
    "ClassificationRules",
    "ClassifiedChange",
    "RulesError",
    "Semantic",
    "build_rules",
    "classify",
    "load_rules_file",
    "summarize",
]
