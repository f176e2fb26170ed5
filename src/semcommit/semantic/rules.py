"""Lookup tables used by the classifier, plus optional YAML extensions."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List

import yaml

from semcommit.config.schema import SemcommitConfig

PACKAGE_FILES: FrozenSet[str] = frozenset({
    "dev-requirements.txt",
    "requirements.txt",
    "Gemfile",
    "Gemfile.lock",
    "package.json",
    "package-lock.json",
})

# Stored without the leading dot
CONFIG_EXTENSIONS: FrozenSet[str] = frozenset({"yml", "yaml", "json"})

DOC_NAMES: FrozenSet[str] = frozenset({"README.md"})

_TABLE_KEYS = ("package_files", "config_extensions", "doc_names")


class RulesError(Exception):
    """Raised when a rules file is unreadable or has the wrong shape."""


def normalise_extension(ext: str) -> str:
    """``".json"`` and ``"json"`` both become ``"json"``."""
    return ext.lstrip(".")


@dataclass(frozen=True)
class ClassificationRules:
    """Membership tables and switches for one classification run."""

    package_files: FrozenSet[str] = PACKAGE_FILES
    config_extensions: FrozenSet[str] = CONFIG_EXTENSIONS
    doc_names: FrozenSet[str] = DOC_NAMES
    docs_prefix: str = "docs"
    strict_docs: bool = False

    def extended(
        self,
        *,
        package_files: Iterable[str] = (),
        config_extensions: Iterable[str] = (),
        doc_names: Iterable[str] = (),
    ) -> "ClassificationRules":
        """Return a copy with the extra table entries added."""
        return ClassificationRules(
            package_files=self.package_files | frozenset(package_files),
            config_extensions=self.config_extensions
            | frozenset(normalise_extension(e) for e in config_extensions),
            doc_names=self.doc_names | frozenset(doc_names),
            docs_prefix=self.docs_prefix,
            strict_docs=self.strict_docs,
        )


DEFAULT_RULES = ClassificationRules()


def load_rules_file(path: Path) -> Dict[str, List[str]]:
    """Read extra lookup tables from a YAML file.

    Expected shape::

        package_files: [Pipfile, poetry.lock]
        config_extensions: [toml]
        doc_names: [CHANGELOG.md]

    Every key is optional. Unknown keys are ignored.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise RulesError(f"Cannot read rules file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise RulesError(f"Failed to parse {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RulesError(f"{path}: expected a mapping at the top level")

    tables: Dict[str, List[str]] = {}
    for key in _TABLE_KEYS:
        values = data.get(key, [])
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            raise RulesError(f"{path}: '{key}' must be a list of strings")
        tables[key] = values
    return tables


def build_rules(config: SemcommitConfig, repo_root: Path) -> ClassificationRules:
    """Merge the default tables with config extras and the rules file."""
    classify_cfg = config.classify
    rules = ClassificationRules(
        docs_prefix=classify_cfg.docs_prefix,
        strict_docs=classify_cfg.strict_docs,
    ).extended(
        package_files=classify_cfg.extra_package_files,
        config_extensions=classify_cfg.extra_config_extensions,
        doc_names=classify_cfg.extra_doc_names,
    )

    if classify_cfg.rules_file:
        rules_path = Path(classify_cfg.rules_file)
        if not rules_path.is_absolute():
            rules_path = repo_root / rules_path
        rules = rules.extended(**load_rules_file(rules_path))

    return rules
