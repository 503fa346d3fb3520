"""Column schema configuration and key definitions."""

from .column_schema import ColumnSchema, load_column_schema
from . import schema_keys as _sk

# Re-export everything defined in schema_keys.__all__
globals().update({k: getattr(_sk, k) for k in _sk.__all__})

__all__ = [
    "ColumnSchema",
    "load_column_schema",
    *_sk.__all__,
]
