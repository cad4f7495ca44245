from pydantic import BaseModel, ConfigDict

from osquery_encoding.utils.enums.encoding_flag import EncodingFlag


class EncoderSettings(BaseModel):
    """
    Named options for the encoder, folded into an EncodingFlag set.
    """
    use_numbers_zero_values: bool = False

    model_config = ConfigDict(
        extra="ignore",         # ignore unknown fields
        validate_default=True,  # validate defaults
    )

    @property
    def flags(self) -> EncodingFlag:
        flags = EncodingFlag(0)
        if self.use_numbers_zero_values:
            flags |= EncodingFlag.USE_NUMBERS_ZERO_VALUES
        return flags

    @classmethod
    def from_flags(cls, flags: EncodingFlag) -> "EncoderSettings":
        return cls(use_numbers_zero_values=flags.has(EncodingFlag.USE_NUMBERS_ZERO_VALUES))
