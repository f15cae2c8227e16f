"""Inventory bounded context - composite tree of categories and items."""

from .node import DEFAULT_STYLE, DescribeStyle, InventoryNode, Item, ItemCategory

__all__ = ["InventoryNode", "Item", "ItemCategory", "DescribeStyle", "DEFAULT_STYLE"]
