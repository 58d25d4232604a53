from .orchestrator import ExportOrchestrator
from .service import export_titles, fetch_counts
from .sink import FileSink, OutputSink, StreamSink, format_record

__all__ = [
    "ExportOrchestrator",
    "FileSink",
    "OutputSink",
    "StreamSink",
    "export_titles",
    "fetch_counts",
    "format_record",
]
