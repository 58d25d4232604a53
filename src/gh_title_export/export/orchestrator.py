from __future__ import annotations

import asyncio
import logging

from ..fetch.counts import CountProbe
from ..fetch.cursor import CursorListFetcher
from ..fetch.paged import PagedListFetcher
from ..models import ExportResult, ItemType, RepoCounts
from .sink import OutputSink

logger = logging.getLogger(__name__)


class ExportOrchestrator:
    """Drive one export: counts, both fetchers, merge, then the sink.

    Issue and pull request records always precede discussion records in the
    output. A failed count probe or discussion page aborts the run; failed
    issue pages only shrink the output.
    """

    def __init__(
        self,
        counts: CountProbe,
        issues: PagedListFetcher,
        discussions: CursorListFetcher,
        sink: OutputSink,
    ) -> None:
        self.counts = counts
        self.issues = issues
        self.discussions = discussions
        self.sink = sink

    async def run(self, owner: str, repo: str) -> ExportResult:
        self.sink.prepare()
        counts = await self.counts.fetch(owner, repo)
        logger.debug(
            "%s/%s: %d issues, %d pull requests, %d discussions",
            owner,
            repo,
            counts.issues,
            counts.pull_requests,
            counts.discussions,
        )
        records = await self._fetch_all(owner, repo, counts)
        written = self.sink.write_records(records)
        return ExportResult(
            record_count=written,
            written_to=self.sink.identifier,
            failed_pages=len(self.issues.last_failures),
        )

    async def _fetch_all(self, owner: str, repo: str, counts: RepoCounts):
        # Both fetchers finish before any failure propagates, so no page request
        # outlives the client.
        results = await asyncio.gather(
            self.issues.fetch(owner, repo, counts.issues_and_pull_requests),
            self.discussions.fetch(owner, repo, ItemType.DISCUSSION, counts.discussions),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result
        issue_records, discussion_records = results
        return [*issue_records, *discussion_records]
