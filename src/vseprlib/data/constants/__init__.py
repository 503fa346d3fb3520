"""Processing, file and element constants for vseprlib."""

from .processing_constants import ProcessingConstants, FileConstants, ElementConstants, ErrorMessages

__all__ = [
    "ProcessingConstants",
    "FileConstants",
    "ElementConstants",
    "ErrorMessages"
]
