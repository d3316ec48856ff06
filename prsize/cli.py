import asyncio
import logging
from collections.abc import Callable
from functools import wraps
from logging import getLogger
from typing import Any

import typer
from pydantic import SecretStr, ValidationError
from rich.console import Console
from rich.markup import escape

from .conf.settings import PROJECT_NAME, Settings
from .errors import PRSizeError
from .services.formatter import format_label_result, get_size_label_color, show_progress
from .services.github.client import GitHubAPIClient
from .services.labels import reconcile_size_label
from .services.pr_size import classify_pr_size

app = typer.Typer()
logger = getLogger(__name__)
console = Console()
err_console = Console(stderr=True)


def syncify(f: Callable[..., Any]) -> Callable[..., Any]:
    """This simple decorator converts an async function into a sync function,
    allowing it to work with Typer.
    """

    @wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return asyncio.run(f(*args, **kwargs))

    return wrapper


@app.command(help=f"Display the current installed version of {PROJECT_NAME}.")
def version() -> None:
    from . import __version__

    typer.echo(f"{PROJECT_NAME} - {__version__}")


@app.command(help="Print the size label for a given number of changed files and lines.")
def classify(
    files: int = typer.Argument(..., min=0, help="Number of files changed"),
    lines: int = typer.Argument(..., min=0, help="Number of lines added plus deleted"),
) -> None:
    typer.echo(classify_pr_size(files, lines))


@app.command(name="label", help="Label a pull request with its size and remove stale size labels.")
@syncify
async def label_pull_request(
    token: str | None = typer.Option(
        None,
        "--token",
        help="GitHub token (overrides TOKEN env var)",
    ),
    owner: str | None = typer.Option(
        None,
        "--owner",
        help="Repository owner (overrides REPO_OWNER env var)",
    ),
    repo: str | None = typer.Option(
        None,
        "--repo",
        help="Repository name (overrides REPO_NAME env var)",
    ),
    pr_number: int | None = typer.Option(
        None,
        "--pr",
        help="Pull request number (overrides PR_NUMBER env var)",
    ),
) -> None:
    """Label a pull request with its size and remove stale size labels."""
    try:
        config = _load_settings(token=token, owner=owner, repo=repo, pr_number=pr_number)
        target = config.require_target()
    except (PRSizeError, ValidationError) as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    _configure_logging(config.debug)

    try:
        async with GitHubAPIClient(target.token, base_url=config.github_api_url, timeout=config.github_timeout) as client:
            with show_progress(f"Fetching {target}..."):
                stats = await client.get_pull_request_stats(target.owner, target.repo, target.number)

            size = classify_pr_size(stats.files_changed, stats.lines_changed)
            logger.info(f"{target} has {stats.files_changed} files / {stats.lines_changed} lines changed: {size}")

            with show_progress(f"Applying size label {size!r}..."):
                change = await reconcile_size_label(client, target.owner, target.repo, target.number, size)

    except PRSizeError as e:
        logger.error(f"Error processing {target}: {e}")
        err_console.print(f"[red]Error processing the pull request:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except Exception as e:
        logger.exception(f"Unexpected error processing {target}")
        err_console.print(f"[red]Error processing the pull request:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    format_label_result(str(target), stats, change, console=console)
    color = get_size_label_color(size)
    console.print(f"Labeled {target} as [{color}]{size}[/{color}]")


def _load_settings(
    token: str | None = None,
    owner: str | None = None,
    repo: str | None = None,
    pr_number: int | None = None,
) -> Settings:
    """Load settings from the environment and apply command line overrides.

    Raises:
        ValidationError: If an environment value or override is invalid
    """
    # Init arguments take precedence over environment variables
    overrides: dict[str, Any] = {}
    if token:
        overrides["token"] = SecretStr(token)
    if owner:
        overrides["repo_owner"] = owner
    if repo:
        overrides["repo_name"] = repo
    if pr_number is not None:
        overrides["pr_number"] = pr_number

    return Settings(**overrides)


def _configure_logging(debug: bool) -> None:
    """Raise the package log level to DEBUG when debug mode is enabled."""
    if debug:
        logging.getLogger("prsize").setLevel(logging.DEBUG)
        logger.debug("Debug logging enabled")


if __name__ == "__main__":
    app()
