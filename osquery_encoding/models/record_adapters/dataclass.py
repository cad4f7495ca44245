import dataclasses
from typing import Any, Iterator

from osquery_encoding.business_logic.field_resolver import TAG_NAME, json_schema_tag
from osquery_encoding.models.field_entry import RecordField
from osquery_encoding.models.record_adapter import RecordAdapter


class DataclassAdapter(RecordAdapter):
    """
    Reads tags from field(metadata={"osquery": ...}). Pydantic dataclasses
    may also carry them in Field(json_schema_extra={"osquery": ...}).
    """

    @classmethod
    def supports(cls, value: Any) -> bool:
        return dataclasses.is_dataclass(value) and not isinstance(value, type)

    def fields(self, value: Any) -> Iterator[RecordField]:
        pydantic_fields = getattr(type(value), "__pydantic_fields__", None) or {}

        for f in dataclasses.fields(value):
            tag = f.metadata.get(TAG_NAME)
            if tag is None and f.name in pydantic_fields:
                tag = json_schema_tag(pydantic_fields[f.name])

            yield RecordField(
                name=f.name,
                # field(init=False) without a default may never have been set
                value=getattr(value, f.name, None),
                tag=tag,
            )
