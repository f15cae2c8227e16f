"""Narrative Sink Port - Interface for emitting narrative text.

Every demo object reports what it does as human-readable lines of text.
Domain objects only know this port; infrastructure decides where the
lines end up (console, in-memory buffer).
"""
from abc import ABC, abstractmethod


class NarrativeSinkPort(ABC):
    """Port for narrative output.

    Implementations accept one line at a time and are assumed never to
    fail for the purposes of the demos.
    """

    @abstractmethod
    def emit(self, line: str) -> None:
        """Emit a single line of narrative text.

        Args:
            line: Text without a trailing newline
        """
        pass
