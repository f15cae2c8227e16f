"""Singleton demo: two requests, one registry."""
from questpatterns.config.schemas import AppConfig
from questpatterns.domain.base.ports import NarrativeSinkPort
from questpatterns.domain.registry import get_instance


def run_singleton_demo(sink: NarrativeSinkPort, config: AppConfig) -> None:
    highlander = get_instance(sink)
    sparticus = get_instance(sink)

    if highlander is sparticus:
        sink.emit("There can be only one: both requests returned the same instance.")
    else:
        sink.emit("Two different instances were returned.")
