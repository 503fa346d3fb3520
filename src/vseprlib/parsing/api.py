import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from vseprlib.core.elements import ElementRecord
from vseprlib.core.registry import ElementRegistry
from vseprlib.parsing.config.column_schema import ColumnSchema, load_column_schema
from vseprlib.parsing.processors.registry_builder import ElementRegistryBuilder
from vseprlib.parsing.validation.errors import RowFormatError, SchemaError, SourceUnavailableError

logger = logging.getLogger(__name__)


def load_elements(path: Union[str, Path], schema_path: Optional[Union[str, Path]] = None,
                  skip_malformed_rows: bool = False) -> ElementRegistry:
    """
    Load a periodic table data file into a new element registry.

    This is the entry point for the geometry modeler and renderer. Every call
    reads the file again and returns an independent registry; nothing is
    cached between calls.
    Args:
        path: Path to the comma-delimited periodic table file
        schema_path: Optional YAML column schema; the packaged layout is used when omitted
        skip_malformed_rows: Log and skip rows with a bad field count or color
            instead of failing the load
    Returns:
        Read-only registry containing every element plus the 'LP' lone pair entry
    Raises:
        SourceUnavailableError: If the data file cannot be opened
        RowFormatError: If a row is malformed and skip_malformed_rows is False
        SchemaError: If the schema file is invalid
    Examples:
        registry = load_elements('data/periodic_table.csv')
        carbon = registry['C']
        print(carbon.valence_electron_count)  # 4
    """
    logger.info("Loading elements from: %s (schema=%s, skip_malformed_rows=%s)",
                path, schema_path or "default", skip_malformed_rows)
    schema = load_column_schema(schema_path) if schema_path is not None else ColumnSchema.default()
    try:
        builder = ElementRegistryBuilder(schema=schema, skip_malformed_rows=skip_malformed_rows)
        registry = builder.build_from_file(path)
    except Exception as e:
        logger.error("Failed to load elements from %s: %s", path, e)
        raise
    logger.info("Successfully loaded %d registry entries from %s", len(registry), path)
    return registry


def lookup_element(registry: ElementRegistry, symbol: str) -> ElementRecord:
    """
    Look up an element by symbol.
    Raises:
        ElementNotFoundError: If the symbol is not in the registry
    """
    return registry.get_element(symbol)


def validate_element_file(path: Union[str, Path], schema_path: Optional[Union[str, Path]] = None) -> bool:
    """
    Validate a data file without keeping the resulting registry.
    Args:
        path: Path to the periodic table file to validate
        schema_path: Optional YAML column schema
    Returns:
        True if every data row can be extracted
    Raises:
        FileNotFoundError: If the data file doesn't exist
        ValueError: If a row or the schema is invalid
    """
    logger.info("Validating element file: %s", path)
    try:
        load_elements(path, schema_path=schema_path)
        logger.info("Element file validation successful for: %s", path)
        return True
    except SourceUnavailableError as e:
        raise FileNotFoundError(f"Element file not available: {path}") from e
    except (RowFormatError, SchemaError) as e:
        raise ValueError(f"Element file validation failed: {str(e)}") from e


def get_element_info(registry: ElementRegistry, symbol: str) -> Dict[str, Any]:
    """
    Summary of one registry entry for listings and debugging output.
    Example:
        info = get_element_info(registry, 'O')
        print(f"{info['name']}: {info['valence_electron_count']} valence electrons")
    """
    return registry.get_element(symbol).to_dict()
