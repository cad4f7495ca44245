from osquery_encoding.settings import EncoderSettings
from osquery_encoding.utils.enums.encoding_flag import EncodingFlag, EncodingFlagUseNumbersZeroValues


def test_default_settings_have_no_flags():
    assert EncoderSettings().flags == EncodingFlag(0)


def test_settings_from_dict_ignore_unknown_fields():
    settings = EncoderSettings.model_validate({"use_numbers_zero_values": True, "unknown": 1})
    assert settings.flags.has(EncodingFlag.USE_NUMBERS_ZERO_VALUES)


def test_from_flags_round_trip():
    settings = EncoderSettings.from_flags(EncodingFlagUseNumbersZeroValues)
    assert settings.use_numbers_zero_values is True
    assert settings.flags == EncodingFlagUseNumbersZeroValues

    assert EncoderSettings.from_flags(EncodingFlag(0)).use_numbers_zero_values is False


def test_flag_has():
    assert not EncodingFlag(0).has(EncodingFlag.USE_NUMBERS_ZERO_VALUES)
    assert EncodingFlag.USE_NUMBERS_ZERO_VALUES.has(EncodingFlag.USE_NUMBERS_ZERO_VALUES)
