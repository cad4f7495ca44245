from typing import Any, Iterator

from osquery_encoding.models.field_entry import RecordField
from osquery_encoding.models.record_adapter import RecordAdapter


class NamedTupleAdapter(RecordAdapter):
    # Named tuples have no per-field metadata, so keys are always field names.

    @classmethod
    def supports(cls, value: Any) -> bool:
        return isinstance(value, tuple) and hasattr(type(value), "_fields")

    def fields(self, value: tuple) -> Iterator[RecordField]:
        for name, item in zip(type(value)._fields, value):
            yield RecordField(name=name, value=item)
