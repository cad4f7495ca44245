from typing import Any, Dict, Optional

from osquery_encoding.models.field_entry import RecordField

TAG_NAME = "osquery"
SKIP_TAG = "-"


def osquery_tag(key: str) -> Dict[str, str]:
    """
    Build the metadata that names a record field's output key.

    Works for both dataclasses and pydantic models:
        pid: int = field(metadata=osquery_tag("process_id"))
        pid: int = Field(json_schema_extra=osquery_tag("process_id"))

    Use osquery_tag("-") to leave the field out of the output.
    """
    return {TAG_NAME: key}


def is_visible(name: str) -> bool:
    return not name.startswith("_")


def resolve_key(field: RecordField) -> Optional[str]:
    """
    Returns the output key for a record field, or None when the field is
    private or tagged with "-".
    """
    if not is_visible(field.name):
        return None

    tag = "" if field.tag is None else str(field.tag)
    if tag == SKIP_TAG:
        return None
    return tag or field.name


def json_schema_tag(info: Any) -> Optional[str]:
    """Read the osquery tag from a pydantic FieldInfo's json_schema_extra."""
    extra = getattr(info, "json_schema_extra", None)
    # json_schema_extra may also be a callable; only dicts carry tags
    return extra.get(TAG_NAME) if isinstance(extra, dict) else None
