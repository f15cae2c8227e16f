"""Domain ports - interfaces implemented by infrastructure."""

from .narrative_port import NarrativeSinkPort

__all__ = ["NarrativeSinkPort"]
