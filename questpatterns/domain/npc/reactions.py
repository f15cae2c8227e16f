"""Reactions to a threat - interchangeable behaviors an NPC can hold."""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from questpatterns.domain.npc.actor import Actor


class ReactionBehavior(ABC):
    """Base class for all threat reactions.

    ``owner`` is a plain association back to the actor, used only to
    word the narrative. The behavior never drives the actor.
    """

    def __init__(self, owner: "Actor"):
        self.owner = owner

    def _narrate(self, line: str) -> None:
        self.owner.sink.emit(line)

    @abstractmethod
    def react(self) -> None:
        """Act out the reaction."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(owner={self.owner.name!r})"


class FightBehavior(ReactionBehavior):
    def react(self) -> None:
        self._narrate(f"{self.owner.name} draws their weapon to fight the enemy.")


class FleeBehavior(ReactionBehavior):
    def react(self) -> None:
        self._narrate(f"{self.owner.name} runs away from the enemy.")


class SeekProtectionBehavior(ReactionBehavior):
    def react(self) -> None:
        self._narrate(f"{self.owner.name} runs away from the enemy to find a parent.")


class NoReactionBehavior(ReactionBehavior):
    """Fallback for actors that were never given a reaction."""

    def react(self) -> None:
        self._narrate(
            f"{self.owner.name} just stands there, either too scared or really not paying attention."
        )
