"""Export issue, pull request and discussion titles of a GitHub repository."""

from .config import ExportConfig
from .export import ExportOrchestrator, FileSink, StreamSink, export_titles
from .models import ExportResult, ItemType, Record, RepoCounts

__all__ = [
    "ExportConfig",
    "ExportOrchestrator",
    "ExportResult",
    "FileSink",
    "ItemType",
    "Record",
    "RepoCounts",
    "StreamSink",
    "export_titles",
]
