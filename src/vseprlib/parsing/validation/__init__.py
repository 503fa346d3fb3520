"""Validation utilities for vseprlib."""

from .errors import (SourceUnavailableError, RowFormatError, MalformedColorError,
                     RecordValidationError, SchemaError)
from .record_validator import validate_element_record, find_record_violations

__all__ = [
    "SourceUnavailableError",
    "RowFormatError",
    "MalformedColorError",
    "RecordValidationError",
    "SchemaError",
    "validate_element_record",
    "find_record_violations"
]
