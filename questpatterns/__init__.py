"""Quest Patterns - Root Package.

Four classic object-oriented design patterns, each told through a small
fantasy game narrative:

Key Components:
    - Adapter: a mage channels spells through a staff to fight as a warrior
    - Composite: an inventory of nested categories and items
    - Singleton: one shared registry per process
    - Strategy: NPCs with swappable reactions to a threat

Architecture:
    domain objects depend only on ports; infrastructure provides the
    adapters, narrative sinks, registries and logging; the application
    layer replays each demo; the cli runs them.
"""

from ._package import PACKAGE_NAME, __version__

__package_name__ = PACKAGE_NAME
