from __future__ import annotations

DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_PAGE_SIZE = 100
MAX_PAGE_SIZE = 100
DEFAULT_TIMEOUT = 30.0
STDOUT_TARGET = "-"

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_TIMEOUT",
    "MAX_PAGE_SIZE",
    "STDOUT_TARGET",
]
