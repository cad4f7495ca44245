from abc import abstractmethod
from typing import Any, Iterator, Optional

from osquery_encoding.models.field_entry import RecordField
from osquery_encoding.utils.interfaces.ifactory import IFactory


class RecordAdapter(IFactory):
    """
    Plugin base for the record shapes the encoder can enumerate.
    Each subclass lives in its own module under models/record_adapters.
    """

    @classmethod
    def for_value(cls, value: Any) -> Optional["RecordAdapter"]:
        for adapter_cls in cls._registry.values():
            if adapter_cls.supports(value):
                return adapter_cls()
        return None

    @classmethod
    @abstractmethod
    def supports(cls, value: Any) -> bool:
        """Return True when this adapter can enumerate the value's fields."""
        pass

    @abstractmethod
    def fields(self, value: Any) -> Iterator[RecordField]:
        """Yield every declared field in declaration order, private ones included."""
        pass
