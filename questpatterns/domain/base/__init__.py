"""Base domain layer - shared kernel for all pattern contexts."""

from .exceptions import (
    ChildIndexError,
    ConfigurationError,
    CyclicCompositionError,
    DomainException,
    PreconditionViolationError,
    SingletonConstructionError,
    UnknownDemoError,
    UnknownReactionError,
)
from .ports import NarrativeSinkPort

__all__ = [
    "DomainException",
    "PreconditionViolationError",
    "CyclicCompositionError",
    "ChildIndexError",
    "SingletonConstructionError",
    "UnknownReactionError",
    "UnknownDemoError",
    "ConfigurationError",
    "NarrativeSinkPort",
]
