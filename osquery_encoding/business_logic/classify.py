import weakref
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

import osquery_encoding.models.record_adapters  # noqa: F401  registers the adapters
from osquery_encoding.models.record_adapter import RecordAdapter
from osquery_encoding.utils.enums.value_kind import ValueKind


def classify(value: Any) -> ValueKind:
    """Map a runtime value onto the closed set of kinds the encoder handles."""
    if value is None or isinstance(value, weakref.ref):
        return ValueKind.REFERENCE
    if isinstance(value, str):
        return ValueKind.TEXT
    # bool is a subclass of int, so it has to be checked first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.SIGNED_INTEGER
    if isinstance(value, (float, Decimal)):
        return ValueKind.FLOAT
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if RecordAdapter.for_value(value) is not None:
        return ValueKind.RECORD
    return ValueKind.OTHER


def type_name(value: Any) -> str:
    return type(value).__name__
