from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from .github.models import LabelChange, PullRequestStats


def get_size_label_color(size_label: str | None) -> str:
    """Get rich color for a size label.

    Args:
        size_label: Size label string

    Returns:
        Rich color name
    """
    if not size_label:
        return "white"

    color_map = {
        "tiny": "blue",
        "small": "green",
        "medium": "yellow",
        "large": "red",
    }

    return color_map.get(size_label, "white")


def format_label_result(
    target: str,
    stats: PullRequestStats,
    change: LabelChange,
    console: Console | None = None,
) -> None:
    """Display the outcome of a labeling run.

    Args:
        target: Pull request identifier (owner/repo#number)
        stats: Change counts used for classification
        change: Label changes applied to the pull request
        console: Console to print to (default: new stdout console)
    """
    console = console or Console()
    color = get_size_label_color(change.added)

    table = Table(title=f"Pull Request {target}", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Files changed", str(stats.files_changed))
    table.add_row("Lines changed", f"{stats.lines_changed} (+{stats.additions} / -{stats.deletions})")
    table.add_row("Size", f"[{color}]{change.added}[/{color}]")
    table.add_row("Removed", ", ".join(change.removed) if change.removed else "-")
    table.add_row("Labels", ", ".join(change.labels) if change.labels else "-")

    console.print(table)


def show_progress(message: str) -> Progress:
    """Create and return a progress spinner.

    Args:
        message: Message to display with spinner

    Returns:
        Progress context manager
    """
    progress = Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        transient=True,
    )
    progress.add_task(description=message, total=None)
    return progress
