"""Combatant entities - fighters and casters entering the tournament."""
from pydantic import BaseModel, ConfigDict, Field

from questpatterns.domain.base.ports import NarrativeSinkPort
from questpatterns.domain.combatants.ports import MagicUser, WeaponUser


class Combatant(BaseModel):
    """Base class for everyone who steps into the arena."""
    model_config = ConfigDict(
        validate_assignment=True,
        arbitrary_types_allowed=True,
        populate_by_name=True,
    )

    name: str = Field(..., min_length=1)
    hp: int = Field(..., ge=0)
    defense: int = Field(..., ge=0, alias="def")
    sink: NarrativeSinkPort = Field(..., exclude=True, repr=False)

    def _narrate(self, line: str) -> None:
        self.sink.emit(line)


class Fighter(Combatant, WeaponUser):
    """A combatant who fights with a weapon."""

    weapon: str = Field(..., min_length=1)
    atk: int = Field(..., ge=0)

    def perform_attack(self) -> None:
        self._narrate(f"{self.name} attacks with a {self.weapon} for {self.atk} damage.")

    def perform_guard(self) -> None:
        self._narrate(f"{self.name} guards, reducing the damage.")


class Caster(Combatant, MagicUser):
    """A combatant who casts spells directly from their hands."""

    element: str = Field(..., min_length=1)
    mp: int = Field(..., ge=0)
    mag: int = Field(..., ge=0)

    def cast_spell(self) -> None:
        self._narrate(f"{self.name} casts {self.element} for {self.mag} damage.")

    def cast_shield(self) -> None:
        self._narrate(f"{self.name} casts a shield, neutralizing the damage.")
