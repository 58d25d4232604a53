from __future__ import annotations

from typing import Protocol

from rich.console import Console
from rich.progress import BarColumn, Progress, TaskID, TextColumn

from .models import ItemType


class ProgressReporter(Protocol):
    def page(self, item_type: ItemType, page: int, total_pages: int) -> None: ...


class NullProgress:
    def page(self, item_type: ItemType, page: int, total_pages: int) -> None:
        return None


class RichProgress:
    """One in-place ``page X/Y`` line per item group, rendered on stderr."""

    def __init__(self, console: Console | None = None) -> None:
        self._progress = Progress(
            TextColumn("Fetching {task.description}"),
            TextColumn("page {task.completed:.0f}/{task.total:.0f}"),
            BarColumn(),
            console=console or Console(stderr=True),
        )
        self._tasks: dict[ItemType, TaskID] = {}

    def __enter__(self) -> "RichProgress":
        self._progress.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._progress.stop()

    def page(self, item_type: ItemType, page: int, total_pages: int) -> None:
        # Cursor estimates can undershoot; never show a page past the total.
        total = max(total_pages, page)
        task_id = self._tasks.get(item_type)
        if task_id is None:
            self._tasks[item_type] = self._progress.add_task(
                item_type.label, total=total, completed=page
            )
            return
        self._progress.update(task_id, total=total, completed=page)
