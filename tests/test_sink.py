import io

from gh_title_export.export.sink import FileSink, StreamSink, format_record
from gh_title_export.models import Record


def test_format_record_does_not_escape_titles():
    record = Record(number=7, title="Fix a, b\nand c")
    assert format_record(record) == "7,Fix a, b\nand c\n"


def test_file_sink_recreates_file(tmp_path):
    path = tmp_path / "out" / "titles.csv"
    path.parent.mkdir()
    path.write_text("stale\n", encoding="utf-8")

    sink = FileSink(path)
    sink.prepare()
    assert path.read_text(encoding="utf-8") == ""

    written = sink.write_records([Record(number=1, title="Ünïcode"), Record(number=2, title="b")])
    assert written == 2
    assert path.read_bytes() == "1,Ünïcode\n2,b\n".encode("utf-8")
    assert sink.identifier == str(path)


def test_stream_sink_writes_lines():
    stream = io.StringIO()
    sink = StreamSink(stream)
    sink.prepare()

    assert sink.write_records([Record(number=3, title="x")]) == 1
    assert stream.getvalue() == "3,x\n"
    assert sink.identifier == "<stdout>"
