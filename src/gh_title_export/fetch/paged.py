from __future__ import annotations

import asyncio
import logging
import math
from typing import Sequence

from ..errors import PageFetchError
from ..github.client import GitHubClient
from ..models import (
    ItemType,
    PageFailure,
    PageOutcome,
    PageRequest,
    PageSuccess,
    Record,
)
from ..progress import NullProgress, ProgressReporter
from ..runtime_defaults import DEFAULT_PAGE_SIZE

logger = logging.getLogger(__name__)


def page_count(total_items: int, page_size: int) -> int:
    if total_items <= 0:
        return 0
    return math.ceil(total_items / page_size)


def fold_outcomes(
    outcomes: Sequence[PageOutcome],
) -> tuple[list[Record], list[PageFetchError]]:
    """Split per-page outcomes into the merged records and the page failures."""
    records: list[Record] = []
    failures: list[PageFetchError] = []
    for outcome in outcomes:
        if isinstance(outcome, PageSuccess):
            records.extend(outcome.records)
        else:
            failures.append(PageFetchError(outcome.request.page_number or 0, outcome.error))
    return records, failures


class PagedListFetcher:
    """Fetch issues and pull requests through numbered REST pages.

    Every page is requested at once; there is no cap on in-flight requests
    unless the client carries a limiter. A failing page is logged and skipped,
    so the result can hold fewer records than the count it was sized from.
    """

    def __init__(
        self,
        client: GitHubClient,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        progress: ProgressReporter | None = None,
    ) -> None:
        self.client = client
        self.page_size = page_size
        self.progress = progress or NullProgress()
        self.last_failures: list[PageFetchError] = []

    async def fetch(self, owner: str, repo: str, total_item_count: int) -> list[Record]:
        outcomes = await self.fetch_outcomes(owner, repo, total_item_count)
        records, failures = fold_outcomes(outcomes)
        for failure in failures:
            logger.error("Error fetching issues/pull requests %s", failure)
        self.last_failures = failures
        return records

    async def fetch_outcomes(
        self, owner: str, repo: str, total_item_count: int
    ) -> list[PageOutcome]:
        total_pages = page_count(total_item_count, self.page_size)
        requests = [
            PageRequest(page_size=self.page_size, page_number=page)
            for page in range(1, total_pages + 1)
        ]
        pending = []
        for request in requests:
            self.progress.page(ItemType.ISSUE, request.page_number, total_pages)
            pending.append(self._fetch_page(owner, repo, request))
        results = await asyncio.gather(*pending, return_exceptions=True)

        outcomes: list[PageOutcome] = []
        for request, result in zip(requests, results):
            if isinstance(result, Exception):
                outcomes.append(PageFailure(request=request, error=result))
            elif isinstance(result, BaseException):
                raise result
            else:
                outcomes.append(PageSuccess(request=request, records=result))
        return outcomes

    async def _fetch_page(self, owner: str, repo: str, request: PageRequest) -> list[Record]:
        items = await self.client.get_json(
            f"/repos/{owner}/{repo}/issues",
            params={
                "state": "all",
                "per_page": request.page_size,
                "page": request.page_number,
            },
        )
        return [
            Record(number=item["number"], title=item["title"]) for item in items or []
        ]
