"""Demo catalogue - maps demo names to their runners."""
from typing import Callable, Dict, Iterable, Optional

from questpatterns.config.schemas import AppConfig
from questpatterns.domain.base.exceptions import UnknownDemoError
from questpatterns.domain.base.ports import NarrativeSinkPort
from questpatterns.infrastructure.logging.logger import get_logger

from .adapter_demo import run_adapter_demo
from .composite_demo import run_composite_demo
from .singleton_demo import run_singleton_demo
from .strategy_demo import run_strategy_demo

DemoRunner = Callable[[NarrativeSinkPort, AppConfig], None]

DEMOS: Dict[str, DemoRunner] = {
    "adapter": run_adapter_demo,
    "composite": run_composite_demo,
    "singleton": run_singleton_demo,
    "strategy": run_strategy_demo,
}

logger = get_logger(__name__)


def run_demo(name: str, sink: NarrativeSinkPort, config: Optional[AppConfig] = None) -> None:
    """
    Run a single demo by name.

    Raises:
        UnknownDemoError: If name is not in the catalogue
    """
    if name not in DEMOS:
        raise UnknownDemoError(name, list(DEMOS))
    logger.info("Running demo", demo=name)
    DEMOS[name](sink, config or AppConfig())


def run_demos(names: Iterable[str], sink: NarrativeSinkPort, config: Optional[AppConfig] = None) -> None:
    """Run several demos in order."""
    config = config or AppConfig()
    for name in names:
        run_demo(name, sink, config)
