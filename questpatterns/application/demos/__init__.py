"""Demo scenarios, one per pattern."""

from .adapter_demo import run_adapter_demo
from .catalogue import DEMOS, run_demo, run_demos
from .composite_demo import build_inventory, run_composite_demo
from .singleton_demo import run_singleton_demo
from .strategy_demo import run_strategy_demo

__all__ = [
    "DEMOS",
    "run_demo",
    "run_demos",
    "run_adapter_demo",
    "run_composite_demo",
    "build_inventory",
    "run_singleton_demo",
    "run_strategy_demo",
]
