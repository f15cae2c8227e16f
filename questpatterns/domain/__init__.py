"""
Domain Layer - one bounded context per pattern

- base/: Shared kernel with exceptions and the narrative port
- combatants/: Weapon and magic capabilities (adapter target and adaptee)
- inventory/: Category and item tree (composite)
- registry/: Process-wide shared registry (singleton)
- npc/: Actors with swappable threat reactions (strategy)
"""

from .base import DomainException, NarrativeSinkPort

__all__ = ["DomainException", "NarrativeSinkPort"]
