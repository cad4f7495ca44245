from osquery_encoding.business_logic.field_resolver import osquery_tag
from osquery_encoding.encoding import marshal_to_map, marshal_to_map_with_flags
from osquery_encoding.settings import EncoderSettings
from osquery_encoding.utils.enums.encoding_flag import EncodingFlag, EncodingFlagUseNumbersZeroValues
from osquery_encoding.utils.errors import (
    ConversionError,
    EncodingError,
    InvalidInputError,
    UnsupportedTypeError,
)

__all__ = [
    "ConversionError",
    "EncoderSettings",
    "EncodingError",
    "EncodingFlag",
    "EncodingFlagUseNumbersZeroValues",
    "InvalidInputError",
    "UnsupportedTypeError",
    "marshal_to_map",
    "marshal_to_map_with_flags",
    "osquery_tag",
]
