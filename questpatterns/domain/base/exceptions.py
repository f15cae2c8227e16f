# questpatterns/domain/base/exceptions.py
from typing import Any, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class PreconditionViolationError(DomainException, ValueError):
    """Raised when an operation receives an absent or unusable argument."""
    def __init__(self, message: str, argument: Optional[str] = None):
        super().__init__(message)
        self.argument = argument


class CyclicCompositionError(PreconditionViolationError):
    """Raised when attaching a node would make a category its own descendant."""
    def __init__(self, parent_name: str, child_name: str):
        super().__init__(
            f"Cannot add {child_name} to {parent_name}: the tree would contain a cycle",
            argument="node",
        )
        self.parent_name = parent_name
        self.child_name = child_name


class ChildIndexError(DomainException, IndexError):
    """Raised when a structural mutation addresses a child position that does not exist."""
    def __init__(self, category_name: str, index: int, size: int):
        super().__init__(
            f"Child index {index} out of range for {category_name} with {size} children"
        )
        self.category_name = category_name
        self.index = index
        self.size = size


class SingletonConstructionError(DomainException):
    """Raised when a singleton is constructed outside its accessor."""
    def __init__(self, class_name: str):
        super().__init__(
            f"{class_name} cannot be constructed directly, use {class_name}.get_instance()"
        )
        self.class_name = class_name


class UnknownReactionError(DomainException):
    """Raised when a reaction behavior name is not registered."""
    def __init__(self, name: str, available: Optional[List[str]] = None):
        self.available = sorted(available or [])
        super().__init__(
            f"Reaction '{name}' not registered. Available reactions: {self.available}"
        )
        self.name = name


class UnknownDemoError(DomainException):
    """Raised when a demo name is not part of the catalogue."""
    def __init__(self, name: str, available: Optional[List[str]] = None):
        self.available = list(available or [])
        super().__init__(f"Unknown demo '{name}'. Available demos: {self.available}")
        self.name = name


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details
