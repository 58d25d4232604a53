from __future__ import annotations

from pydantic import BaseModel, Field

from .runtime_defaults import (
    DEFAULT_BASE_URL,
    DEFAULT_PAGE_SIZE,
    DEFAULT_TIMEOUT,
    MAX_PAGE_SIZE,
)


class ExportConfig(BaseModel):
    """Settings shared by every component of one export run."""

    token: str = Field(repr=False)
    page_size: int = Field(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    # Requests per second; None leaves the page fan-out unthrottled.
    max_rate: float | None = Field(None, gt=0)
