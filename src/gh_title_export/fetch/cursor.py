from __future__ import annotations

import logging

from ..errors import CursorFetchError
from ..github.client import GitHubClient
from ..models import ItemType, PageRequest, Record
from ..progress import NullProgress, ProgressReporter
from ..runtime_defaults import DEFAULT_PAGE_SIZE
from .paged import page_count

logger = logging.getLogger(__name__)


def connection_query(item_type: ItemType) -> str:
    return f"""
query ($owner: String!, $repo: String!, $perPage: Int, $cursor: String) {{
  repository(owner: $owner, name: $repo) {{
    {item_type.value}(first: $perPage, after: $cursor) {{
      edges {{
        node {{
          title
          number
        }}
      }}
      pageInfo {{
        endCursor
        hasNextPage
      }}
    }}
  }}
}}
"""


class CursorListFetcher:
    """Walk a GraphQL connection one page at a time.

    Each request depends on the previous page's ``endCursor``, so pages are
    strictly sequential. The first failing page aborts the whole fetch and no
    records collected so far are returned.
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

    async def fetch(
        self,
        owner: str,
        repo: str,
        item_type: ItemType,
        total_item_count: int,
    ) -> list[Record]:
        query = connection_query(item_type)
        estimated_pages = page_count(total_item_count, self.page_size)
        records: list[Record] = []

        cursor: str | None = None
        has_next_page = True
        page = 1
        while has_next_page:
            self.progress.page(item_type, page, estimated_pages)
            request = PageRequest(page_size=self.page_size, cursor=cursor)
            try:
                page_records, has_next_page, cursor = await self._fetch_page(
                    owner, repo, item_type, query, request
                )
            except Exception as exc:
                raise CursorFetchError(item_type.value, page, exc) from exc
            records.extend(page_records)
            page += 1

        logger.debug("fetched %d %s in %d pages", len(records), item_type.value, page - 1)
        return records

    async def _fetch_page(
        self,
        owner: str,
        repo: str,
        item_type: ItemType,
        query: str,
        request: PageRequest,
    ) -> tuple[list[Record], bool, str | None]:
        data = await self.client.graphql(
            query,
            {
                "owner": owner,
                "repo": repo,
                "perPage": request.page_size,
                "cursor": request.cursor,
            },
        )
        repository = data.get("repository")
        if repository is None:
            raise KeyError(f"repository {owner}/{repo} missing from response")
        connection = repository[item_type.value]
        page_records = [
            Record(number=edge["node"]["number"], title=edge["node"]["title"])
            for edge in connection.get("edges") or []
        ]
        page_info = connection.get("pageInfo") or {}
        return page_records, bool(page_info.get("hasNextPage")), page_info.get("endCursor")
