from __future__ import annotations

from pathlib import Path
from typing import Iterable, Protocol, TextIO

from ..models import Record


def format_record(record: Record) -> str:
    # Titles are written as-is; commas and newlines in them are not escaped.
    return f"{record.number},{record.title}\n"


class OutputSink(Protocol):
    identifier: str

    def prepare(self) -> None: ...

    def write_records(self, records: Iterable[Record]) -> int: ...


class FileSink:
    """Write records to a file that is recreated at the start of each run."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.identifier = str(self.path)

    def prepare(self) -> None:
        self.path.unlink(missing_ok=True)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.touch()

    def write_records(self, records: Iterable[Record]) -> int:
        count = 0
        with self.path.open("a", encoding="utf-8", newline="\n") as fh:
            for record in records:
                fh.write(format_record(record))
                count += 1
        return count


class StreamSink:
    def __init__(self, stream: TextIO, identifier: str = "<stdout>") -> None:
        self.stream = stream
        self.identifier = identifier

    def prepare(self) -> None:
        return None

    def write_records(self, records: Iterable[Record]) -> int:
        count = 0
        for record in records:
            self.stream.write(format_record(record))
            count += 1
        self.stream.flush()
        return count
