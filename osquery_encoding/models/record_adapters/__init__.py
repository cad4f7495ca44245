# Importing the adapter modules registers them with RecordAdapter.
from osquery_encoding.models.record_adapters import dataclass, named_tuple, pydantic_model  # noqa: F401
