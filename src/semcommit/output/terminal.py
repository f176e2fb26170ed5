"""Rich terminal reporter: colour-coded categories per changed path."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from semcommit.semantic.classifier import Category
from semcommit.semantic.summary import ChangeSummary

_CATEGORY_STYLE = {
    Category.CHORE: "bold black on bright_cyan",
    Category.DOCS: "bold black on yellow",
    Category.TEST: "bold white on dark_green",
}


def _category_pill(category: Category) -> Text:
    if category is Category.NONE:
        return Text("-", style="dim")
    return Text(f" {category.value} ", style=_CATEGORY_STYLE.get(category, ""))


def render(summary: ChangeSummary, *, show_summary: bool = True, console: Console | None = None) -> None:
    """Print a classification summary using Rich."""
    console = console or Console()

    if summary.is_empty:
        console.print("[dim]No changes to classify.[/dim]")
        return

    if summary.changes:
        table = Table(
            title="Semantic Classification",
            title_style="bold",
            border_style="dim",
        )
        table.add_column("Status", justify="center", width=8)
        table.add_column("Path", style="magenta")
        table.add_column("Category", justify="center", width=10)

        for change in summary.changes:
            status = change.status
            path = f"{status.from_} → {status.to}" if status.is_rename else status.to
            table.add_row(Text(f"{status.x}{status.y}"), Text(path), _category_pill(change.category))

        console.print(table)

    for bad in summary.malformed:
        console.print(
            f"[bold red]Malformed status line {bad.line_no}:[/bold red] "
            f"{escape(bad.reason)} ({escape(repr(bad.line))})",
            highlight=False,
        )

    if show_summary:
        _print_summary(console, summary)


def _print_summary(console: Console, summary: ChangeSummary) -> None:
    counts = summary.counts
    console.print()
    console.print(f"[dim]Files:[/dim]       {len(summary.changes)}")
    console.print(f"[dim]Common dir:[/dim]  {summary.common_dir}")
    for category in (Category.CHORE, Category.DOCS, Category.TEST, Category.NONE):
        label = category.value or "unclassified"
        console.print(f"[dim]{label + ':':<12}[/dim] {counts.get(category, 0)}")
    if summary.malformed:
        console.print(f"[dim]Malformed:[/dim]   {len(summary.malformed)}")

    overall = summary.category
    console.print()
    if overall is Category.NONE:
        console.print("[bold yellow]Mixed or unclassified changes.[/bold yellow]")
    else:
        console.print(f"[bold green]All changes are {overall.value} changes.[/bold green]")
