from __future__ import annotations


class ExportError(RuntimeError):
    """Base class for failures raised by the title export."""


class UsageError(ExportError):
    pass


class GitHubApiError(ExportError):
    def __init__(self, status_code: int | None, message: str) -> None:
        self.status_code = status_code
        self.message = message
        prefix = f"GitHub API error {status_code}" if status_code else "GitHub API error"
        super().__init__(f"{prefix}: {message}")


class GitHubGraphQLError(GitHubApiError):
    def __init__(self, errors: list[dict]) -> None:
        self.errors = errors
        messages = "; ".join(str(err.get("message", err)) for err in errors) or "unknown"
        super().__init__(None, messages)


class CountProbeError(ExportError):
    def __init__(self, owner: str, repo: str, cause: BaseException) -> None:
        self.owner = owner
        self.repo = repo
        self.cause = cause
        super().__init__(f"failed to fetch item counts for {owner}/{repo}: {cause}")


class PageFetchError(ExportError):
    def __init__(self, page: int, cause: BaseException) -> None:
        self.page = page
        self.cause = cause
        super().__init__(f"page {page} failed: {cause!r}")


class CursorFetchError(ExportError):
    def __init__(self, item_type: str, page: int, cause: BaseException) -> None:
        self.item_type = item_type
        self.page = page
        self.cause = cause
        super().__init__(f"{item_type} page {page} failed: {cause!r}")
