"""
vseprlib - Periodic table data for VSEPR molecular geometry modeling.

This library reads a periodic table dataset in comma-delimited text form and
builds a read-only registry of element records keyed by symbol. Each record
carries the properties the geometry modeler and renderer need, several of
them derived from the raw row.

Key Features:
- Tolerant numeric parsing (missing values become 0)
- Valence electron derivation from group numbers and electron configurations
- CPK color decoding and averaged single-bond radii
- Column layout described in YAML rather than hard-coded indices
- A synthetic 'LP' lone pair entry in every registry

Main Components:
- Core: Element records, the element registry and base exceptions
- Parsing: Tokenizing, extraction, validation and registry assembly
- Data: Processing constants and the packaged column schema
"""

try:
    from importlib.metadata import version, PackageNotFoundError
    __version__ = version("vseprlib")
except PackageNotFoundError:
    __version__ = "0.1.0+unknown"

# Core definitions
from .core.elements import ElementRecord
from .core.registry import ElementRegistry
from .core.exceptions import ElementDataError, ElementNotFoundError

# Main API functions
from .parsing.api import (
    load_elements,
    lookup_element,
    validate_element_file,
    get_element_info
)

# Processing
from .parsing.config.column_schema import ColumnSchema, load_column_schema
from .parsing.processors.element_extractor import ElementExtractor
from .parsing.processors.registry_builder import ElementRegistryBuilder
from .parsing.validation.errors import (
    SourceUnavailableError,
    RowFormatError,
    MalformedColorError,
    RecordValidationError,
    SchemaError
)

__all__ = [
    # Version
    '__version__',

    # Core classes
    'ElementRecord',
    'ElementRegistry',

    # Main API
    'load_elements',
    'lookup_element',
    'validate_element_file',
    'get_element_info',

    # Processing
    'ColumnSchema',
    'load_column_schema',
    'ElementExtractor',
    'ElementRegistryBuilder',

    # Errors
    'ElementDataError',
    'ElementNotFoundError',
    'SourceUnavailableError',
    'RowFormatError',
    'MalformedColorError',
    'RecordValidationError',
    'SchemaError'
]
