"""NPC bounded context - actors and their threat reactions."""

from .actor import Actor, ChildNPC, CivilianNPC, GuardNPC, MercenaryNPC
from .reactions import (
    FightBehavior,
    FleeBehavior,
    NoReactionBehavior,
    ReactionBehavior,
    SeekProtectionBehavior,
)

__all__ = [
    "Actor",
    "GuardNPC",
    "CivilianNPC",
    "ChildNPC",
    "MercenaryNPC",
    "ReactionBehavior",
    "FightBehavior",
    "FleeBehavior",
    "SeekProtectionBehavior",
    "NoReactionBehavior",
]
