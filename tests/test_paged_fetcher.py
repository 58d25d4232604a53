import logging

import pytest

from fakes import FakeGitHub, RecordingProgress, make_items
from gh_title_export.errors import PageFetchError
from gh_title_export.fetch.paged import PagedListFetcher, fold_outcomes, page_count
from gh_title_export.models import (
    ItemType,
    PageFailure,
    PageRequest,
    PageSuccess,
    Record,
)


@pytest.mark.parametrize(
    ("total", "page_size", "expected"),
    [(0, 100, 0), (1, 100, 1), (100, 100, 1), (101, 100, 2), (200, 100, 2), (7, 3, 3)],
)
def test_page_count(total, page_size, expected):
    assert page_count(total, page_size) == expected


@pytest.mark.asyncio
@pytest.mark.parametrize("total", [1, 5, 6, 11])
async def test_dispatches_one_request_per_page(make_client, total):
    fake = FakeGitHub(issues=make_items(total))
    fetcher = PagedListFetcher(make_client(fake), page_size=5)

    records = await fetcher.fetch("octo", "repo", total)

    assert sorted(fake.rest_pages) == list(range(1, page_count(total, 5) + 1))
    assert [r.number for r in records] == list(range(1, total + 1))
    assert all(path == "/repos/octo/repo/issues" for _, path, _, _ in fake.calls)


@pytest.mark.asyncio
async def test_zero_items_dispatches_nothing(make_client):
    fake = FakeGitHub()
    records = await PagedListFetcher(make_client(fake)).fetch("octo", "repo", 0)

    assert records == []
    assert fake.calls == []


@pytest.mark.asyncio
async def test_failed_page_is_skipped_and_reported_once(make_client, caplog):
    fake = FakeGitHub(issues=make_items(9), failing_pages={2})
    fetcher = PagedListFetcher(make_client(fake), page_size=3)

    with caplog.at_level(logging.ERROR, logger="gh_title_export"):
        records = await fetcher.fetch("octo", "repo", 9)

    assert [r.number for r in records] == [1, 2, 3, 7, 8, 9]
    assert sorted(fake.rest_pages) == [1, 2, 3]
    assert len(fetcher.last_failures) == 1
    assert fetcher.last_failures[0].page == 2
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert "page 2" in errors[0].getMessage()


@pytest.mark.asyncio
async def test_all_pages_failing_returns_empty(make_client):
    fake = FakeGitHub(issues=make_items(4), failing_pages={1, 2})
    fetcher = PagedListFetcher(make_client(fake), page_size=2)

    assert await fetcher.fetch("octo", "repo", 4) == []
    assert [f.page for f in fetcher.last_failures] == [1, 2]


@pytest.mark.asyncio
async def test_stale_count_fetches_only_counted_pages(make_client):
    fake = FakeGitHub(issues=make_items(12))
    records = await PagedListFetcher(make_client(fake), page_size=5).fetch(
        "octo", "repo", 7
    )

    assert sorted(fake.rest_pages) == [1, 2]
    assert len(records) == 10


@pytest.mark.asyncio
async def test_progress_reports_each_dispatched_page(make_client):
    fake = FakeGitHub(issues=make_items(5))
    progress = RecordingProgress()
    await PagedListFetcher(make_client(fake), page_size=2, progress=progress).fetch(
        "octo", "repo", 5
    )

    assert progress.updates == [
        (ItemType.ISSUE, 1, 3),
        (ItemType.ISSUE, 2, 3),
        (ItemType.ISSUE, 3, 3),
    ]


def test_fold_outcomes_keeps_success_order():
    first = PageRequest(page_size=1, page_number=1)
    second = PageRequest(page_size=1, page_number=2)
    third = PageRequest(page_size=1, page_number=3)
    boom = RuntimeError("boom")

    records, failures = fold_outcomes(
        [
            PageSuccess(request=first, records=[Record(number=10, title="a")]),
            PageFailure(request=second, error=boom),
            PageSuccess(request=third, records=[Record(number=5, title="b")]),
        ]
    )

    assert [r.number for r in records] == [10, 5]
    assert len(failures) == 1
    assert isinstance(failures[0], PageFetchError)
    assert failures[0].cause is boom
