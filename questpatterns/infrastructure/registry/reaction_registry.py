"""Reaction behavior registry."""

import threading
from typing import Dict, List, Optional, Type

from questpatterns.domain.base.exceptions import UnknownReactionError
from questpatterns.domain.npc.actor import Actor
from questpatterns.domain.npc.reactions import (
    FightBehavior,
    FleeBehavior,
    NoReactionBehavior,
    ReactionBehavior,
    SeekProtectionBehavior,
)
from questpatterns.infrastructure.logging.logger import get_logger


class ReactionRegistry:
    """Registry of reaction behaviors by name."""

    def __init__(self):
        """Initialize reaction registry."""
        self._reactions: Dict[str, Type[ReactionBehavior]] = {}
        self._lock = threading.Lock()
        self.logger = get_logger(__name__)

    def register(self, reaction_name: str, reaction_class: Type[ReactionBehavior]) -> None:
        """
        Register a reaction behavior.

        Args:
            reaction_name: Name of the reaction (e.g., 'fight', 'flee')
            reaction_class: Behavior class, constructed with the owning actor
        """
        if not (isinstance(reaction_class, type) and issubclass(reaction_class, ReactionBehavior)):
            raise TypeError(f"{reaction_class!r} is not a ReactionBehavior subclass")

        with self._lock:
            if reaction_name in self._reactions:
                self.logger.warning("Overriding existing reaction", reaction=reaction_name)

            self._reactions[reaction_name] = reaction_class
            self.logger.debug("Registered reaction", reaction=reaction_name)

    def create(self, reaction_name: str, owner: Actor) -> ReactionBehavior:
        """
        Create a reaction behavior for an actor.

        Args:
            reaction_name: Name of the reaction
            owner: Actor the reaction speaks for

        Returns:
            New reaction behavior instance

        Raises:
            UnknownReactionError: If reaction is not registered
        """
        with self._lock:
            if reaction_name not in self._reactions:
                raise UnknownReactionError(reaction_name, list(self._reactions.keys()))
            reaction_class = self._reactions[reaction_name]

        return reaction_class(owner)

    def list_reactions(self) -> List[str]:
        """List all registered reaction names."""
        with self._lock:
            return list(self._reactions.keys())

    def is_registered(self, reaction_name: str) -> bool:
        """Check if a reaction is registered."""
        with self._lock:
            return reaction_name in self._reactions


def register_default_reactions(registry: ReactionRegistry) -> None:
    """Register the built-in reactions."""
    registry.register("fight", FightBehavior)
    registry.register("flee", FleeBehavior)
    registry.register("seek_protection", SeekProtectionBehavior)
    registry.register("none", NoReactionBehavior)


# Global registry instance
_reaction_registry: Optional[ReactionRegistry] = None
_registry_lock = threading.Lock()


def get_reaction_registry() -> ReactionRegistry:
    """
    Get the global reaction registry instance.

    Returns:
        Global reaction registry with the built-in reactions registered
    """
    global _reaction_registry

    if _reaction_registry is None:
        with _registry_lock:
            if _reaction_registry is None:
                registry = ReactionRegistry()
                register_default_reactions(registry)
                _reaction_registry = registry

    return _reaction_registry
