"""
Constants and packaged data files.

This package provides the processing constants used by the element parser
and the default column schema describing the periodic table CSV layout.
"""

from pathlib import Path

from .constants.processing_constants import ProcessingConstants, FileConstants, ElementConstants, ErrorMessages

SCHEMA_DIR = Path(__file__).parent / "schemas"
DEFAULT_SCHEMA_PATH = SCHEMA_DIR / "periodic_table_columns.yaml"

__all__ = [
    "ProcessingConstants",
    "FileConstants",
    "ElementConstants",
    "ErrorMessages",
    "SCHEMA_DIR",
    "DEFAULT_SCHEMA_PATH"
]
