from __future__ import annotations

import logging

import httpx

from ..errors import CountProbeError, GitHubApiError
from ..github.client import GitHubClient
from ..models import RepoCounts

logger = logging.getLogger(__name__)

COUNTS_QUERY = """
query ($owner: String!, $repo: String!) {
  repository(owner: $owner, name: $repo) {
    issues {
      totalCount
    }
    pullRequests {
      totalCount
    }
    discussions {
      totalCount
    }
  }
}
"""


class CountProbe:
    """Read issue, pull request and discussion totals in one GraphQL call."""

    def __init__(self, client: GitHubClient) -> None:
        self.client = client

    async def fetch(self, owner: str, repo: str) -> RepoCounts:
        try:
            data = await self.client.graphql(
                COUNTS_QUERY, {"owner": owner, "repo": repo}
            )
            repository = data.get("repository")
            if not repository:
                raise GitHubApiError(None, f"repository {owner}/{repo} not found")
            counts = RepoCounts(
                issues=repository["issues"]["totalCount"],
                pull_requests=repository["pullRequests"]["totalCount"],
                discussions=repository["discussions"]["totalCount"],
            )
        except (httpx.HTTPError, GitHubApiError, KeyError, TypeError, ValueError) as exc:
            logger.error("Error fetching repository stats for %s/%s: %r", owner, repo, exc)
            raise CountProbeError(owner, repo, exc) from exc
        logger.debug("counts for %s/%s: %s", owner, repo, counts)
        return counts
