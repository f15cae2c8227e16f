"""Staff Adapter implementing WeaponUser.

This adapter lets a spellcaster take part wherever a weapon user is
expected, by channelling the caster's own spells through an implement.

Architecture:
- Implements domain WeaponUser interface (the target)
- Wraps a MagicUser (the adaptee) it does not own
- Each weapon action narrates the channelling, then delegates once
"""
from typing import Optional

from questpatterns.domain.base.exceptions import PreconditionViolationError
from questpatterns.domain.base.ports import NarrativeSinkPort
from questpatterns.domain.combatants.ports import MagicUser, WeaponUser
from questpatterns.infrastructure.logging.logger import get_logger


class StaffAdapter(WeaponUser):
    """Adapter exposing a MagicUser through the WeaponUser interface.

    The wrapped caster keeps its own lifetime; the adapter only holds a
    reference to it.
    """

    def __init__(
        self,
        caster: MagicUser,
        implement: str = "staff",
        sink: Optional[NarrativeSinkPort] = None,
    ):
        """Initialize with the caster to wrap.

        Args:
            caster: Spellcaster whose actions are channelled
            implement: Name of the weapon-shaped implement used to channel
            sink: Narrative sink; defaults to the caster's own sink

        Raises:
            PreconditionViolationError: If caster is absent or not a MagicUser
        """
        if caster is None:
            raise PreconditionViolationError("StaffAdapter requires a caster", argument="caster")
        if not isinstance(caster, MagicUser):
            raise PreconditionViolationError(
                f"StaffAdapter can only wrap a MagicUser, got {type(caster).__name__}",
                argument="caster",
            )
        if sink is None:
            sink = getattr(caster, "sink", None)
        if sink is None:
            raise PreconditionViolationError(
                "StaffAdapter needs a narrative sink when the caster has none",
                argument="sink",
            )

        self._caster = caster
        self._implement = implement
        self._sink = sink
        self.logger = get_logger(__name__)

    @property
    def caster(self) -> MagicUser:
        """The wrapped caster."""
        return self._caster

    @property
    def name(self) -> str:
        return self._caster.name

    def perform_attack(self) -> None:
        """Channel an attack spell through the implement."""
        self._sink.emit(f"{self._caster.name} uses a {self._implement} to cast a spell.")
        self.logger.debug("Delegating attack to cast_spell", caster=self._caster.name)
        self._caster.cast_spell()

    def perform_guard(self) -> None:
        """Channel a shield spell through the implement."""
        self._sink.emit(f"{self._caster.name} uses a {self._implement} to cast a shield.")
        self.logger.debug("Delegating guard to cast_shield", caster=self._caster.name)
        self._caster.cast_shield()
