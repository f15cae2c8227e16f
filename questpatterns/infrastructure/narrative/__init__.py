"""Narrative output package."""

from .sinks import BufferedNarrativeSink, ConsoleNarrativeSink

__all__ = ["ConsoleNarrativeSink", "BufferedNarrativeSink"]
