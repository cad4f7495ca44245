from enum import Flag


class EncodingFlag(Flag):
    # Numeric zero values (int, float, Decimal) are rendered as "0"
    # instead of the default empty string.
    USE_NUMBERS_ZERO_VALUES = 1

    def has(self, option: "EncodingFlag") -> bool:
        return bool(self & option)


EncodingFlagUseNumbersZeroValues = EncodingFlag.USE_NUMBERS_ZERO_VALUES
