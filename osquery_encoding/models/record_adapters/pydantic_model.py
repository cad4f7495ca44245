from typing import Any, Iterator

from pydantic import BaseModel

from osquery_encoding.business_logic.field_resolver import json_schema_tag
from osquery_encoding.models.field_entry import RecordField
from osquery_encoding.models.record_adapter import RecordAdapter


class PydanticModelAdapter(RecordAdapter):
    """Reads tags from Field(json_schema_extra={"osquery": ...})."""

    @classmethod
    def supports(cls, value: Any) -> bool:
        return isinstance(value, BaseModel)

    def fields(self, value: BaseModel) -> Iterator[RecordField]:
        for name, info in type(value).model_fields.items():
            yield RecordField(name=name, value=getattr(value, name), tag=json_schema_tag(info))
