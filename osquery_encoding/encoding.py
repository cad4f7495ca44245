import logging
import weakref
from collections.abc import Mapping
from typing import Any, Dict

from osquery_encoding.business_logic.classify import classify, type_name
from osquery_encoding.business_logic.field_resolver import resolve_key
from osquery_encoding.business_logic.value_converter import NO_FLAGS, convert_value_to_string
from osquery_encoding.models.record_adapter import RecordAdapter
from osquery_encoding.utils.enums.encoding_flag import EncodingFlag
from osquery_encoding.utils.enums.value_kind import ValueKind
from osquery_encoding.utils.errors import (
    ConversionError,
    InvalidInputError,
    UnsupportedTypeError,
)

logger = logging.getLogger(__name__)


def marshal_to_map(value: Any) -> Dict[str, str]:
    """
    Converts a record (dataclass, pydantic model, named tuple), a single-level
    str-keyed mapping, or a weakref to either, into a Dict[str, str].
    Record field keys come from the "osquery" tag when present.
    """
    return marshal_to_map_with_flags(value, NO_FLAGS)


def marshal_to_map_with_flags(value: Any, flags: EncodingFlag = NO_FLAGS) -> Dict[str, str]:
    if value is None:
        raise InvalidInputError("input cannot be nil")

    if isinstance(value, weakref.ref):
        target = value()
        if target is None:
            raise InvalidInputError("input pointer is nil")
        value = target

    kind = classify(value)
    logger.debug("Marshalling %s as %s", type_name(value), kind.name)

    if kind is ValueKind.MAPPING:
        return _marshal_mapping(value, flags)

    if kind is ValueKind.RECORD:
        return _marshal_record(value, flags)

    raise UnsupportedTypeError(
        f"unsupported type: {type_name(value)}, must be a record, mapping, or reference to one of them",
        kind=type_name(value),
    )


def _marshal_mapping(value: Mapping, flags: EncodingFlag) -> Dict[str, str]:
    for key in value:
        if not isinstance(key, str):
            raise UnsupportedTypeError(
                f"map keys must be strings, got {type_name(key)}",
                kind=type_name(key),
            )

    result: Dict[str, str] = {}
    for key, item in value.items():
        result[key] = _convert_entry(key, item, flags)
    return result


def _marshal_record(value: Any, flags: EncodingFlag) -> Dict[str, str]:
    adapter = RecordAdapter.for_value(value)

    result: Dict[str, str] = {}
    for field in adapter.fields(value):
        key = resolve_key(field)
        if key is None:
            logger.debug("Skipping field %s.%s", type_name(value), field.name)
            continue
        # Colliding keys: the later field wins
        result[key] = _convert_entry(key, field.value, flags)
    return result


def _convert_entry(key: str, item: Any, flags: EncodingFlag) -> str:
    try:
        return convert_value_to_string(item, flags)
    except UnsupportedTypeError as e:
        raise ConversionError(key, e) from e
