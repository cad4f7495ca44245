import logging
import math
from decimal import Decimal
from typing import Any, Union

from osquery_encoding.business_logic.classify import classify, type_name
from osquery_encoding.utils.enums.encoding_flag import EncodingFlag
from osquery_encoding.utils.enums.value_kind import ValueKind
from osquery_encoding.utils.errors import UnsupportedTypeError

logger = logging.getLogger(__name__)

NO_FLAGS = EncodingFlag(0)


def convert_value_to_string(value: Any, flags: EncodingFlag = NO_FLAGS) -> str:
    """
    Stringify a single field value the way osquery expects it:
    - None and dead references -> ""
    - str -> unchanged text
    - bool -> "1" / "0"
    - int, float, Decimal -> decimal text, "" for zero unless
      USE_NUMBERS_ZERO_VALUES is set
    - anything else -> str(value)
    """
    kind = classify(value)

    if kind is ValueKind.REFERENCE:
        target = value() if value is not None else None
        if target is None:
            return ""
        return convert_value_to_string(target, flags)

    if kind is ValueKind.TEXT:
        # str subclasses (e.g. str-based enums) render as their raw content
        return str.__str__(value)

    if kind is ValueKind.BOOLEAN:
        # osquery expects booleans as "0" or "1"; never suppressed
        return "1" if value else "0"

    keep_zero = flags.has(EncodingFlag.USE_NUMBERS_ZERO_VALUES)

    if kind is ValueKind.SIGNED_INTEGER:
        val = int(value)
        if not keep_zero and val == 0:
            return ""
        return str(val)

    if kind is ValueKind.FLOAT:
        if not keep_zero and _is_zero(value):
            return ""
        return format_float(value)

    # Records and mappings nested inside a value are not expanded
    try:
        return str(value)
    except Exception as e:
        logger.debug("Cannot render value of type %s: %s", type_name(value), e)
        raise UnsupportedTypeError(f"unsupported type ({type_name(value)})", kind=type_name(value)) from e


def _is_zero(value: Union[float, Decimal]) -> bool:
    if isinstance(value, Decimal):
        return value.is_zero()
    return value == 0


def format_float(value: Union[float, Decimal]) -> str:
    """
    Shortest round-tripping decimal text in fixed notation,
    e.g. 1.0 -> "1", 1e20 -> "100000000000000000000", 1e-7 -> "0.0000001".
    """
    if isinstance(value, Decimal):
        if value.is_nan():
            return "NaN"
        if value.is_infinite():
            return "-Inf" if value.is_signed() else "+Inf"
        dec = value
    else:
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "+Inf" if value > 0 else "-Inf"
        # repr() already yields the shortest digits that round-trip
        dec = Decimal(repr(float(value)))

    text = format(dec, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
