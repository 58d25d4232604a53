import pytest

from gh_title_export.errors import GitHubGraphQLError
from gh_title_export.github.client import GitHubClient, GitHubResponse


@pytest.mark.asyncio
async def test_graphql_posts_query_and_returns_data():
    seen = []

    async def fake_request(method, path, params=None, json=None):
        seen.append((method, path, json))
        return GitHubResponse(data={"data": {"viewer": {"login": "octo"}}}, headers={})

    client = GitHubClient(token="x", request_func=fake_request)
    data = await client.graphql("query { viewer { login } }", {"a": 1})

    assert data == {"viewer": {"login": "octo"}}
    assert seen == [
        ("POST", "/graphql", {"query": "query { viewer { login } }", "variables": {"a": 1}})
    ]


@pytest.mark.asyncio
async def test_graphql_errors_raise():
    async def fake_request(method, path, params=None, json=None):
        return GitHubResponse(
            data={
                "data": {"repository": None},
                "errors": [{"message": "Could not resolve to a Repository"}],
            },
            headers={},
        )

    client = GitHubClient(token="x", request_func=fake_request)
    with pytest.raises(GitHubGraphQLError, match="Could not resolve"):
        await client.graphql("query { x }")


@pytest.mark.asyncio
async def test_get_json_passes_params():
    async def fake_request(method, path, params=None, json=None):
        assert method == "GET"
        assert params == {"page": 2}
        return GitHubResponse(data=[{"number": 1}], headers={})

    client = GitHubClient(token="x", request_func=fake_request)
    assert await client.get_json("/repos/octo/repo/issues", params={"page": 2}) == [
        {"number": 1}
    ]


@pytest.mark.asyncio
async def test_http_client_sends_token_authorization():
    client = GitHubClient(token="ghp_abc")
    async with client:
        assert client._client.headers["Authorization"] == "token ghp_abc"
