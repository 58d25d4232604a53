from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Mapping

import httpx
from aiolimiter import AsyncLimiter

from ..errors import GitHubApiError, GitHubGraphQLError
from ..runtime_defaults import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GitHubResponse:
    data: Any
    headers: Mapping[str, str]
    status_code: int | None = None


RequestFunc = Callable[
    [str, str, dict | None, dict | None],
    Awaitable[GitHubResponse],
]


class GitHubClient:
    """Async client for the REST and GraphQL endpoints of one GitHub host.

    Requests are not retried. When ``limiter`` is given every request waits on
    it; otherwise requests are dispatched as fast as callers issue them.
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        limiter: AsyncLimiter | None = None,
        request_func: RequestFunc | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._limiter = limiter
        self._request_func = request_func
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None
        if request_func is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers={
                    "Authorization": f"token {token}",
                    "Accept": "application/vnd.github+json",
                    "User-Agent": "gh-title-export",
                },
                timeout=timeout,
            )

    async def __aenter__(self) -> "GitHubClient":
        if self._client is None and self._request_func is None:
            raise RuntimeError("GitHub client unavailable.")
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._client is not None:
            await self._client.aclose()

    async def request(
        self,
        method: str,
        path: str,
        params: dict | None = None,
        json: dict | None = None,
    ) -> GitHubResponse:
        if self._limiter is None:
            return await self._request(method, path, params, json)
        async with self._limiter:
            return await self._request(method, path, params, json)

    async def _request(
        self,
        method: str,
        path: str,
        params: dict | None = None,
        json: dict | None = None,
    ) -> GitHubResponse:
        logger.debug("%s %s params=%s", method, path, params)
        if self._request_func is not None:
            return await self._request_func(method, path, params, json)

        if self._client is None:
            raise RuntimeError("HTTP client not initialized")
        response = await self._client.request(method, path, params=params, json=json)
        if response.status_code >= 400:
            raise GitHubApiError(response.status_code, _error_message(response))
        return GitHubResponse(
            data=response.json(),
            headers=response.headers,
            status_code=response.status_code,
        )

    async def get_json(self, path: str, params: dict | None = None) -> Any:
        response = await self.request("GET", path, params=params)
        return response.data

    async def graphql(self, query: str, variables: dict | None = None) -> dict:
        """POST a GraphQL document and return its ``data`` member.

        A payload carrying ``errors`` raises ``GitHubGraphQLError`` even when
        partial data is present.
        """
        response = await self.request(
            "POST",
            "/graphql",
            json={"query": query, "variables": variables or {}},
        )
        payload = response.data or {}
        errors = payload.get("errors")
        if errors:
            raise GitHubGraphQLError(errors)
        return payload.get("data") or {}


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.reason_phrase
