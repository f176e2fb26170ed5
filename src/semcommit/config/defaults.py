"""Starter .semcommit.toml template."""

DEFAULT_TOML = """\
# semcommit configuration
version = "1.0"

[classify]
strict_docs = false            # true: only paths whose first segment is docs_prefix are docs
docs_prefix = "docs"
# extra_package_files = ["Pipfile", "poetry.lock"]
# extra_config_extensions = ["toml", "ini"]
# extra_doc_names = ["CHANGELOG.md"]
# rules_file = ".semcommit-rules.yml"

[output]
format = "terminal"            # terminal | json
show_summary = true
"""
