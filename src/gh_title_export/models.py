from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ItemType(str, Enum):
    """Item groups exported by the tool.

    Issues and pull requests share one REST resource and one output group, so
    they are a single type here. The value is the GraphQL connection name.
    """

    ISSUE = "issues"
    DISCUSSION = "discussions"

    @property
    def label(self) -> str:
        if self is ItemType.ISSUE:
            return "issues/pull requests"
        return self.value


class Record(BaseModel):
    model_config = ConfigDict(frozen=True)

    number: int = Field(gt=0)
    title: str


class RepoCounts(BaseModel):
    model_config = ConfigDict(frozen=True)

    issues: int = Field(ge=0)
    pull_requests: int = Field(ge=0)
    discussions: int = Field(ge=0)

    @property
    def issues_and_pull_requests(self) -> int:
        return self.issues + self.pull_requests


class ExportResult(BaseModel):
    record_count: int
    written_to: str
    failed_pages: int = 0


@dataclass(frozen=True)
class PageRequest:
    page_size: int
    page_number: int | None = None
    cursor: str | None = None


@dataclass(frozen=True)
class PageSuccess:
    request: PageRequest
    records: list[Record] = field(default_factory=list)


@dataclass(frozen=True)
class PageFailure:
    request: PageRequest
    error: BaseException


PageOutcome = PageSuccess | PageFailure
