"""Combatants bounded context - weapon and magic capabilities."""

from .models import Caster, Combatant, Fighter
from .ports import MagicUser, WeaponUser

__all__ = ["Combatant", "Fighter", "Caster", "WeaponUser", "MagicUser"]
