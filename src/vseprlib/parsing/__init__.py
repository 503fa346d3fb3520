"""
Parsing modules for vseprlib.

This package handles reading the periodic table file, tokenizing rows,
extracting element records and assembling the element registry.
"""

from .api import load_elements, lookup_element, validate_element_file, get_element_info
from .config.column_schema import ColumnSchema, load_column_schema
from .processors.element_extractor import ElementExtractor
from .processors.registry_builder import ElementRegistryBuilder

__all__ = [
    'load_elements',
    'lookup_element',
    'validate_element_file',
    'get_element_info',
    'ColumnSchema',
    'load_column_schema',
    'ElementExtractor',
    'ElementRegistryBuilder'
]
