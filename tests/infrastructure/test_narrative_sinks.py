import io

from questpatterns.domain.base.ports import NarrativeSinkPort
from questpatterns.infrastructure.narrative import BufferedNarrativeSink, ConsoleNarrativeSink


def test_console_sink_writes_lines_to_stream():
    stream = io.StringIO()
    sink = ConsoleNarrativeSink(stream)

    sink.emit("first")
    sink.emit("second")

    assert stream.getvalue() == "first\nsecond\n"


def test_console_sink_defaults_to_stdout(capsys):
    ConsoleNarrativeSink().emit("hello")
    assert capsys.readouterr().out == "hello\n"


def test_buffered_sink_keeps_order_and_copies():
    sink = BufferedNarrativeSink()
    sink.emit("a")
    sink.emit("b")

    lines = sink.lines
    lines.append("c")

    assert sink.lines == ["a", "b"]
    assert sink.text() == "a\nb"


def test_buffered_sink_clear():
    sink = BufferedNarrativeSink()
    sink.emit("a")
    sink.clear()
    assert sink.lines == []
    assert sink.text() == ""


def test_sinks_implement_port():
    assert isinstance(ConsoleNarrativeSink(), NarrativeSinkPort)
    assert isinstance(BufferedNarrativeSink(), NarrativeSinkPort)
