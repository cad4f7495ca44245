from typing import Any, Dict, Iterable, List, Optional, Union

from osquery_encoding.encoding import marshal_to_map_with_flags
from osquery_encoding.pipeline.core import Transform
from osquery_encoding.settings import EncoderSettings
from osquery_encoding.utils.enums.encoding_flag import EncodingFlag


class Flattenizer(Transform):
    """
    Turns records or mappings into osquery rows (Dict[str, str]) using a
    zero-value policy fixed at construction time.
    """

    def __init__(self, settings: Optional[Union[EncoderSettings, EncodingFlag]] = None):
        if settings is None:
            settings = EncoderSettings()
        if isinstance(settings, EncodingFlag):
            settings = EncoderSettings.from_flags(settings)
        self.settings = settings

    @property
    def flags(self) -> EncodingFlag:
        return self.settings.flags

    def process(self, data: Any) -> Dict[str, str]:
        return marshal_to_map_with_flags(data, self.flags)

    def process_many(self, items: Iterable[Any]) -> List[Dict[str, str]]:
        # Fails on the first bad item; no partial list is returned
        return [self.process(item) for item in items]
