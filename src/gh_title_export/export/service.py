from __future__ import annotations

from aiolimiter import AsyncLimiter

from ..config import ExportConfig
from ..fetch.counts import CountProbe
from ..fetch.cursor import CursorListFetcher
from ..fetch.paged import PagedListFetcher
from ..github.client import GitHubClient
from ..models import ExportResult, RepoCounts
from ..progress import ProgressReporter
from .orchestrator import ExportOrchestrator
from .sink import OutputSink


def build_client(config: ExportConfig) -> GitHubClient:
    limiter = AsyncLimiter(config.max_rate, 1) if config.max_rate else None
    return GitHubClient(
        token=config.token,
        base_url=config.base_url,
        limiter=limiter,
        timeout=config.timeout,
    )


async def export_titles(
    owner: str,
    repo: str,
    config: ExportConfig,
    sink: OutputSink,
    *,
    progress: ProgressReporter | None = None,
    client: GitHubClient | None = None,
) -> ExportResult:
    """Export every issue, pull request and discussion title of a repository."""
    if client is None:
        client = build_client(config)

    orchestrator = ExportOrchestrator(
        counts=CountProbe(client),
        issues=PagedListFetcher(client, page_size=config.page_size, progress=progress),
        discussions=CursorListFetcher(
            client, page_size=config.page_size, progress=progress
        ),
        sink=sink,
    )
    async with client:
        return await orchestrator.run(owner, repo)


async def fetch_counts(
    owner: str,
    repo: str,
    config: ExportConfig,
    *,
    client: GitHubClient | None = None,
) -> RepoCounts:
    if client is None:
        client = build_client(config)

    async with client:
        return await CountProbe(client).fetch(owner, repo)
