"""Configuration schema: dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal

OutputFormat = Literal["terminal", "json"]

OUTPUT_FORMATS: tuple[str, ...] = ("terminal", "json")


@dataclass
class ClassifyConfig:
    strict_docs: bool = False  # docs must be the first path segment, not just a prefix
    docs_prefix: str = "docs"
    extra_package_files: List[str] = field(default_factory=list)
    extra_config_extensions: List[str] = field(default_factory=list)
    extra_doc_names: List[str] = field(default_factory=list)
    rules_file: str = ""  # optional YAML file with more lookup tables


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_summary: bool = True


@dataclass
class SemcommitConfig:
    version: str = "1.0"
    classify: ClassifyConfig = field(default_factory=ClassifyConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
