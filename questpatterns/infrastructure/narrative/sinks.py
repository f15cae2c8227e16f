"""Narrative sinks implementing NarrativeSinkPort."""
import sys
import threading
from typing import List, Optional, TextIO

from questpatterns.domain.base.ports import NarrativeSinkPort


class ConsoleNarrativeSink(NarrativeSinkPort):
    """Writes narrative lines to a text stream, stdout by default."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def emit(self, line: str) -> None:
        # Resolve stdout lazily so redirection (and pytest capture) is honoured
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(f"{line}\n")
        stream.flush()


class BufferedNarrativeSink(NarrativeSinkPort):
    """Collects narrative lines in memory, in emission order."""

    def __init__(self):
        self._lines: List[str] = []
        self._lock = threading.Lock()

    def emit(self, line: str) -> None:
        with self._lock:
            self._lines.append(line)

    @property
    def lines(self) -> List[str]:
        """Copy of the lines emitted so far."""
        with self._lock:
            return list(self._lines)

    def text(self) -> str:
        """All emitted lines joined by newlines."""
        return "\n".join(self.lines)

    def clear(self) -> None:
        with self._lock:
            self._lines.clear()
