"""Registry infrastructure package."""

from .reaction_registry import (
    ReactionRegistry,
    get_reaction_registry,
    register_default_reactions,
)

__all__ = ["ReactionRegistry", "get_reaction_registry", "register_default_reactions"]
