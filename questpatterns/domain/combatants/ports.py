"""Combat capability ports.

``WeaponUser`` is the capability the tournament expects. ``MagicUser`` is
the differently-shaped capability spellcasters bring; the staff adapter
in infrastructure bridges the two.
"""
from abc import ABC, abstractmethod


class WeaponUser(ABC):
    """Capability of fighting with a weapon."""

    name: str

    @abstractmethod
    def perform_attack(self) -> None:
        """Attack with the weapon at hand."""
        pass

    @abstractmethod
    def perform_guard(self) -> None:
        """Raise a guard against incoming damage."""
        pass


class MagicUser(ABC):
    """Capability of fighting with spells."""

    name: str

    @abstractmethod
    def cast_spell(self) -> None:
        """Cast an offensive spell."""
        pass

    @abstractmethod
    def cast_shield(self) -> None:
        """Cast a protective shield."""
        pass
