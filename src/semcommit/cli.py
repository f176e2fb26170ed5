"""semcommit CLI: Typer application with classify and init commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from semcommit import __version__

app = typer.Typer(
    name="semcommit",
    help="Classify changed files into semantic commit categories.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _resolve_repo_root() -> Path:
    """Find the git repo root, exit 2 on failure."""
    from semcommit.git.adapter import GitError, get_repo_root

    try:
        return get_repo_root()
    except GitError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


# ── classify ──────────────────────────────────────────────────────────────────


@app.command()
def classify(
    paths: Optional[List[str]] = typer.Argument(None, help="Paths to classify instead of git status"),
    stdin: bool = typer.Option(False, "--stdin", help="Read status lines from stdin"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .semcommit.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Classify changed files (git status, stdin, or explicit paths)."""
    from semcommit.config.loader import ConfigError, load_config
    from semcommit.config.schema import OUTPUT_FORMATS
    from semcommit.git.adapter import GitError, get_status_output
    from semcommit.git.models import Status
    from semcommit.git.status_parser import StatusParser
    from semcommit.output import json_report, terminal
    from semcommit.semantic.rules import RulesError, build_rules
    from semcommit.semantic.summary import summarize

    if paths and stdin:
        console.print("[bold red]Error:[/bold red] pass paths or --stdin, not both")
        raise typer.Exit(code=2)

    # Explicit paths and stdin don't need a repository
    needs_git = not paths and not stdin
    if needs_git:
        repo_root = _resolve_repo_root()
    else:
        from semcommit.git.adapter import get_repo_root

        try:
            repo_root = get_repo_root()
        except GitError:
            repo_root = Path.cwd()

    # --- Load config ---
    try:
        cfg = load_config(repo_root, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    # --- CLI overrides ---
    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]

    try:
        rules = build_rules(cfg, repo_root)
    except RulesError as exc:
        console.print(f"[bold red]Rules error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if verbose:
        console.print(f"[dim]Repo root: {repo_root}[/dim]")
        console.print(f"[dim]Strict docs: {rules.strict_docs}[/dim]")
        if cfg.classify.rules_file:
            console.print(f"[dim]Rules file: {cfg.classify.rules_file}[/dim]")

    # --- Collect changes ---
    if paths:
        items = [Status(x=" ", y=" ", to=p) for p in paths]
    else:
        if stdin:
            status_text = sys.stdin.read()
        else:
            try:
                status_text = get_status_output(repo_root)
            except GitError as exc:
                console.print(f"[bold red]Git error:[/bold red] {exc}")
                raise typer.Exit(code=2) from exc
        items = list(StatusParser(status_text).parse())

    if verbose:
        console.print(f"[dim]Status entries: {len(items)}[/dim]")

    summary = summarize(items, rules)

    # --- Output ---
    if cfg.output.format == "json":
        print(json_report.render(summary))
    else:
        terminal.render(summary, show_summary=cfg.output.show_summary)

    if summary.malformed:
        raise typer.Exit(code=1)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .semcommit.toml in the repo root."""
    from semcommit.config.defaults import DEFAULT_TOML
    from semcommit.config.loader import CONFIG_FILENAME

    repo_root = _resolve_repo_root()
    config_path = repo_root / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"semcommit {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """semcommit: classify changed files into semantic commit categories."""
