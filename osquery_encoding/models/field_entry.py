from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class RecordField:
    """
    A single declared field of a record, as discovered by a RecordAdapter.
    """
    name: str                   # declared identifier, e.g. "pid"
    value: Any                  # current value on the instance
    tag: Optional[str] = None   # raw "osquery" tag, None when the field has none
