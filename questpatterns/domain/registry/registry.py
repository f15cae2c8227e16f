"""Process-wide shared registry.

There is at most one ``Registry`` per process. It is created lazily by
the first call to ``Registry.get_instance()`` and lives until the
process exits.
"""
import random
import threading
from datetime import datetime, timezone
from typing import ClassVar, Optional

from questpatterns.domain.base.exceptions import SingletonConstructionError
from questpatterns.domain.base.ports import NarrativeSinkPort
from questpatterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

# Only the accessor below holds this key.
_CONSTRUCTION_KEY = object()


class Registry:
    """
    The one shared registry instance.

    Thread-safe lazy singleton: the check-and-create path is serialized
    by a class-level lock, so concurrent first calls still build a
    single instance.
    """

    _instance: ClassVar[Optional["Registry"]] = None
    _lock = threading.Lock()

    def __init__(self, _key: object = None):
        if _key is not _CONSTRUCTION_KEY:
            raise SingletonConstructionError(self.__class__.__name__)
        self.instance_id: int = random.randrange(10000)
        self.created_at: datetime = datetime.now(timezone.utc)

    @classmethod
    def get_instance(cls, sink: Optional[NarrativeSinkPort] = None) -> "Registry":
        """
        Get the shared registry, creating it on the very first call.

        Args:
            sink: Optional narrative sink told about creation and retrieval

        Returns:
            The shared Registry instance
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    if sink is not None:
                        sink.emit("Created new instance...")
                    cls._instance = cls(_CONSTRUCTION_KEY)
                    logger.debug("Registry created", instance_id=cls._instance.instance_id)

        instance = cls._instance
        if sink is not None:
            sink.emit(f"Returning singleton with id: {instance.instance_id}")
        return instance

    def __repr__(self) -> str:
        return f"Registry(instance_id={self.instance_id})"


def get_instance(sink: Optional[NarrativeSinkPort] = None) -> Registry:
    """Get the shared registry instance."""
    return Registry.get_instance(sink)
