import pytest

from gh_title_export.github.client import GitHubClient


@pytest.fixture
def make_client():
    def _make(request_func) -> GitHubClient:
        return GitHubClient(token="x", request_func=request_func)

    return _make
