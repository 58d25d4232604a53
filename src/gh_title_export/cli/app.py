from __future__ import annotations

import asyncio
import sys

import typer
from rich import print

from ..config import ExportConfig
from ..errors import ExportError, UsageError
from ..export.service import export_titles, fetch_counts
from ..export.sink import FileSink, StreamSink
from ..github.auth import load_token
from ..logs import configure_logging
from ..progress import RichProgress
from ..runtime_defaults import STDOUT_TARGET

app = typer.Typer(add_completion=False, pretty_exceptions_show_locals=False)

RUN_USAGE = (
    "Usage: gh-title-export run <user-or-organisation> <repo> "
    "<personal-access-token-file> [output-file]"
)
COUNTS_USAGE = (
    "Usage: gh-title-export counts <user-or-organisation> <repo> "
    "<personal-access-token-file>"
)


def _require_arguments(usage: str, *values: str | None) -> None:
    if any(value is None for value in values):
        typer.echo(usage)
        raise typer.Exit(code=1)


def _load_config(
    token_file: str, *, strip_token: bool, max_rate: float | None
) -> ExportConfig:
    try:
        token = load_token(token_file, strip=strip_token)
    except (OSError, RuntimeError) as exc:
        raise UsageError(f"cannot read token file {token_file}: {exc}") from exc
    return ExportConfig(token=token, max_rate=max_rate)


def _fail(exc: Exception) -> None:
    typer.secho(f"error: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


@app.command()
def run(
    owner: str | None = typer.Argument(None, help="User or organisation owning the repository"),
    repo: str | None = typer.Argument(None, help="Repository name"),
    token_file: str | None = typer.Argument(None, help="File holding a personal access token"),
    output: str = typer.Argument(
        STDOUT_TARGET, help="Output file; '-' writes to standard output"
    ),
    max_rate: float | None = typer.Option(
        None, help="Throttle requests per second (unthrottled by default)"
    ),
    strip_token: bool = typer.Option(
        False, help="Strip surrounding whitespace from the token file content"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every request"),
):
    """Export `number,title` lines for every issue, pull request and discussion."""
    _require_arguments(RUN_USAGE, owner, repo, token_file)
    configure_logging(verbose)
    to_stdout = output == STDOUT_TARGET
    sink = StreamSink(sys.stdout) if to_stdout else FileSink(output)

    try:
        config = _load_config(token_file, strip_token=strip_token, max_rate=max_rate)
        with RichProgress() as progress:
            result = asyncio.run(
                export_titles(owner, repo, config, sink, progress=progress)
            )
    except ExportError as exc:
        _fail(exc)

    if result.failed_pages:
        typer.secho(
            f"{result.failed_pages} issue/pull request page(s) failed; output is incomplete",
            fg=typer.colors.YELLOW,
            err=True,
        )
    typer.echo(
        f"Written {result.record_count} titles to {result.written_to}", err=to_stdout
    )


@app.command()
def counts(
    owner: str | None = typer.Argument(None, help="User or organisation owning the repository"),
    repo: str | None = typer.Argument(None, help="Repository name"),
    token_file: str | None = typer.Argument(None, help="File holding a personal access token"),
    strip_token: bool = typer.Option(
        False, help="Strip surrounding whitespace from the token file content"
    ),
):
    """Show issue, pull request and discussion totals for a repository."""
    _require_arguments(COUNTS_USAGE, owner, repo, token_file)
    configure_logging()

    try:
        config = _load_config(token_file, strip_token=strip_token, max_rate=None)
        totals = asyncio.run(fetch_counts(owner, repo, config))
    except ExportError as exc:
        _fail(exc)

    print(f"[bold]issues[/bold] {totals.issues}")
    print(f"[bold]pull requests[/bold] {totals.pull_requests}")
    print(f"[bold]discussions[/bold] {totals.discussions}")
