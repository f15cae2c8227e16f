"""Strategy demo: NPCs react to an enemy, and one of them changes its mind.

A guard fights, a civilian flees, a child looks for a parent and a
mercenary fights too. When Ernie sees Lucy in danger his reaction is
swapped at runtime.
"""
from questpatterns.config.schemas import AppConfig
from questpatterns.domain.base.ports import NarrativeSinkPort
from questpatterns.domain.npc import ChildNPC, CivilianNPC, GuardNPC, MercenaryNPC
from questpatterns.infrastructure.registry import get_reaction_registry


def run_strategy_demo(sink: NarrativeSinkPort, config: AppConfig) -> None:
    sally = GuardNPC("Sally the Guard", sink)
    ernie = CivilianNPC("Ernie the Civilian", sink)
    lucy = ChildNPC("Lucy the Child", sink)
    carlo = MercenaryNPC("Carlo the Mercenary", sink)

    for npc in (sally, ernie, lucy, carlo):
        npc.react_to_threat()

    sink.emit("Ernie sees that Lucy is in danger.")
    rescue = get_reaction_registry().create(config.strategy.rescue_reaction, ernie)
    ernie.set_reaction(rescue)
    ernie.react_to_threat()
