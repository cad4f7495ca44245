from enum import Enum, auto


class ValueKind(Enum):
    """
    Closed set of value shapes the encoder knows how to handle.
    """
    REFERENCE = auto()       # None or weakref.ref
    TEXT = auto()
    BOOLEAN = auto()
    SIGNED_INTEGER = auto()  # Python ints are unbounded, unsigned values land here too
    FLOAT = auto()           # float and decimal.Decimal
    RECORD = auto()          # dataclass, pydantic model, named tuple
    MAPPING = auto()
    OTHER = auto()
