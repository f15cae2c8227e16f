"""Composite demo: an inventory split into nested categories."""
from questpatterns.config.schemas import AppConfig
from questpatterns.domain.base.ports import NarrativeSinkPort
from questpatterns.domain.inventory import DescribeStyle, Item, ItemCategory


def build_inventory(style: DescribeStyle) -> ItemCategory:
    """Build the demo inventory tree."""
    inventory = ItemCategory("Inventory", style)

    weapons = ItemCategory("Weapons", style)
    armor = ItemCategory("Armor", style)
    potions = ItemCategory("Potion", style)
    inventory.add(weapons)
    inventory.add(armor)
    inventory.add(potions)

    sword = ItemCategory("Sword", style)
    axe = ItemCategory("Axe", style)
    weapons.add(sword)
    weapons.add(axe)

    helm = ItemCategory("Helm", style)
    shield = ItemCategory("Shield", style)
    armor.add(helm)
    armor.add(shield)

    sword.add(Item("Iron Sword"))
    axe.add(Item("Golden Axe"))
    helm.add(Item("Mithril Helm"))
    shield.add(Item("Elven Shield"))
    # Potions are not divided further
    potions.add(Item("Potion of Health"))

    return inventory


def run_composite_demo(sink: NarrativeSinkPort, config: AppConfig) -> None:
    style = DescribeStyle(
        marker=config.composite.marker,
        indent_step=config.composite.indent_step,
    )
    inventory = build_inventory(style)
    for line in inventory.describe().splitlines():
        sink.emit(line)
