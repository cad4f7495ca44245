import logging
from abc import ABC
from typing import Dict, List, Type

logger = logging.getLogger(__name__)


class IFactory(ABC):
    # Registry to hold subclass references
    _registry: Dict[str, Type] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        # Base classes (like RecordAdapter) get their own registry
        if IFactory in cls.__bases__:
            cls._registry = {}
            return

        # Skip abstract helpers
        if ABC in cls.__bases__:
            return

        # Key = module filename, e.g. 'osquery_encoding.models.record_adapters.dataclass' -> 'dataclass'
        key = cls.__module__.rsplit('.', 1)[-1]

        if key in cls._registry and cls._registry[key] is not cls:
            logger.warning("Overwriting registry key '%s' with %s", key, cls.__name__)

        cls._registry[key] = cls
        logger.debug("Registered %s under '%s'", cls.__name__, key)

    @classmethod
    def get_registry_keys(cls) -> List[str]:
        return list(cls._registry.keys())
