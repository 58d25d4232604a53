from __future__ import annotations

from pathlib import Path


def load_token(path: str | Path, *, strip: bool = False) -> str:
    """Read a personal access token from ``path``.

    The file content is returned verbatim, trailing newline included, unless
    ``strip`` is set.
    """
    token = Path(path).read_text(encoding="utf-8")
    if strip:
        token = token.strip()
    if not token:
        raise RuntimeError(f"Token file is empty: {path}")
    return token
