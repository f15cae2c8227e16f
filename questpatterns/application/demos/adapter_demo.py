"""Adapter demo: a mage joins a weapons-only tournament with a staff.

Myrin, an elf mage, casts spells straight from his hands. The tournament
only accepts fighters, so he channels his magic through a staff.
"""
from questpatterns.config.schemas import AppConfig
from questpatterns.domain.base.ports import NarrativeSinkPort
from questpatterns.domain.combatants import Caster, Fighter
from questpatterns.infrastructure.adapters import StaffAdapter


def run_adapter_demo(sink: NarrativeSinkPort, config: AppConfig) -> None:
    dursal = Fighter(name="Dursal", weapon="axe", hp=100, atk=10, defense=10, sink=sink)
    myrin = Caster(name="Myrin", element="lightning", hp=100, mp=10, mag=10, defense=10, sink=sink)

    myrin_with_staff = StaffAdapter(myrin)

    sink.emit("The Warrior:")
    dursal.perform_attack()
    dursal.perform_guard()

    sink.emit("The Unwrapped Mage:")
    myrin.cast_spell()
    myrin.cast_shield()

    sink.emit("The Mage Using a Staff:")
    myrin_with_staff.perform_attack()
    myrin_with_staff.perform_guard()
