"""NPC actors holding a swappable reaction behavior."""
from typing import ClassVar, Type

from questpatterns.domain.base.exceptions import PreconditionViolationError
from questpatterns.domain.base.ports import NarrativeSinkPort
from questpatterns.domain.npc.reactions import (
    FightBehavior,
    FleeBehavior,
    NoReactionBehavior,
    ReactionBehavior,
    SeekProtectionBehavior,
)
from questpatterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Actor:
    """
    An NPC that reacts to threats through its active reaction behavior.

    Every actor has exactly one active reaction from construction on.
    Subclasses pick their starting reaction with ``default_reaction``;
    ``set_reaction`` swaps it at runtime without changing the actor.
    """

    default_reaction: ClassVar[Type[ReactionBehavior]] = NoReactionBehavior

    def __init__(self, name: str, sink: NarrativeSinkPort):
        if not name:
            raise PreconditionViolationError("Actors need a name", argument="name")
        if sink is None:
            raise PreconditionViolationError(f"{name} needs a narrative sink", argument="sink")
        self.name = name
        self.sink = sink
        self._reaction: ReactionBehavior = self.default_reaction(self)

    @property
    def reaction(self) -> ReactionBehavior:
        """The currently active reaction."""
        return self._reaction

    def set_reaction(self, reaction: ReactionBehavior) -> None:
        """
        Replace the active reaction. Takes effect on the next threat.

        Raises:
            PreconditionViolationError: If reaction is absent or not a ReactionBehavior
        """
        if reaction is None:
            raise PreconditionViolationError(
                f"{self.name} cannot be left without a reaction", argument="reaction"
            )
        if not isinstance(reaction, ReactionBehavior):
            raise PreconditionViolationError(
                f"{type(reaction).__name__} is not a reaction behavior", argument="reaction"
            )
        logger.debug(
            "Reaction changed",
            actor=self.name,
            previous=type(self._reaction).__name__,
            current=type(reaction).__name__,
        )
        self._reaction = reaction

    def react_to_threat(self) -> None:
        """React to a threat using the active reaction."""
        self._reaction.react()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r}, reaction={type(self._reaction).__name__})"


class GuardNPC(Actor):
    """Guards attack an enemy on sight."""
    default_reaction = FightBehavior


class CivilianNPC(Actor):
    """Civilians run away."""
    default_reaction = FleeBehavior


class ChildNPC(Actor):
    """Children look for a parent."""
    default_reaction = SeekProtectionBehavior


class MercenaryNPC(Actor):
    default_reaction = FightBehavior
