"""Shared registry context - the process-wide singleton."""

from .registry import Registry, get_instance

__all__ = ["Registry", "get_instance"]
