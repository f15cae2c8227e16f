"""Inventory tree - categories and items sharing one describe capability.

A category and an item are used the same way: ask any node to describe
itself and a category answers for its whole subtree. Trees are built by
a single writer; they are not safe for concurrent mutation.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from questpatterns.domain.base.exceptions import (
    ChildIndexError,
    CyclicCompositionError,
    PreconditionViolationError,
)
from questpatterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DescribeStyle:
    """How nested children are laid out by ``ItemCategory.describe``."""
    marker: str = "--"
    indent_step: str = "  "


DEFAULT_STYLE = DescribeStyle()


class InventoryNode(ABC):
    """A node in the inventory tree."""

    def __init__(self, name: str):
        if not name:
            raise PreconditionViolationError("Inventory nodes need a name", argument="name")
        self.name = name

    @abstractmethod
    def describe(self, indent: str = "") -> str:
        """Describe this node and everything below it.

        Args:
            indent: Prefix applied to this node's direct children

        Returns:
            Multi-line text, no trailing newline
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"


class Item(InventoryNode):
    """Leaf node. Items never have children."""

    def describe(self, indent: str = "") -> str:
        return self.name


class ItemCategory(InventoryNode):
    """Composite node holding an ordered list of child nodes."""

    def __init__(self, name: str, style: DescribeStyle = DEFAULT_STYLE):
        super().__init__(name)
        self.style = style
        self._children: List[InventoryNode] = []

    @property
    def children(self) -> Tuple[InventoryNode, ...]:
        """Snapshot of the children in insertion order."""
        return tuple(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def add(self, node: InventoryNode) -> None:
        """Append a child node.

        Raises:
            PreconditionViolationError: If node is absent or not an InventoryNode
            CyclicCompositionError: If node is this category or one of its ancestors
        """
        if node is None:
            raise PreconditionViolationError(f"Cannot add nothing to {self.name}", argument="node")
        if not isinstance(node, InventoryNode):
            raise PreconditionViolationError(
                f"Cannot add {type(node).__name__} to {self.name}", argument="node"
            )
        if node is self or (isinstance(node, ItemCategory) and node.contains(self)):
            raise CyclicCompositionError(self.name, node.name)

        self._children.append(node)
        logger.debug("Node added", category=self.name, child=node.name, position=len(self._children) - 1)

    def remove(self, index: int) -> InventoryNode:
        """Remove and return the child at the given position.

        Negative indexes are rejected rather than counted from the end.

        Raises:
            ChildIndexError: If index does not address an existing child
        """
        if not 0 <= index < len(self._children):
            raise ChildIndexError(self.name, index, len(self._children))

        removed = self._children.pop(index)
        logger.debug("Node removed", category=self.name, child=removed.name, position=index)
        return removed

    def contains(self, node: InventoryNode) -> bool:
        """Whether node appears anywhere below this category."""
        stack = list(self._children)
        while stack:
            current = stack.pop()
            if current is node:
                return True
            if isinstance(current, ItemCategory):
                stack.extend(current._children)
        return False

    def iter_leaves(self) -> Iterator[Item]:
        """Yield every item below this category, depth-first in insertion order."""
        stack = list(reversed(self._children))
        while stack:
            current = stack.pop()
            if isinstance(current, ItemCategory):
                stack.extend(reversed(current._children))
            else:
                yield current

    def describe(self, indent: str = "") -> str:
        lines = [f"{self.name}:"]
        child_indent = indent + self.style.indent_step
        for child in self._children:
            lines.append(f"{indent}{self.style.marker}{child.describe(child_indent)}")
        return "\n".join(lines)
