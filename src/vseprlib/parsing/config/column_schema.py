import logging
from dataclasses import dataclass, field
from difflib import get_close_matches
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, List, Mapping, Sequence, Union

from ruamel.yaml import YAML, constructor, scanner
from ruamel.yaml.error import YAMLError

from vseprlib.data import DEFAULT_SCHEMA_PATH, FileConstants
from vseprlib.parsing.config.schema_keys import COLUMN_KEYS, COLUMNS_KEY, DELIMITER_KEY
from vseprlib.parsing.validation.errors import SchemaError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnSchema:
    """
    Named positions of the fields in one periodic table row.

    Extraction code asks the schema for a field by key instead of indexing rows
    directly, so a change of the source layout only touches the YAML file.
    """
    columns: Mapping[str, int]
    delimiter: str = FileConstants.DEFAULT_DELIMITER
    source: str = field(default="<inline>", compare=False)

    def __post_init__(self) -> None:
        _validate_delimiter(self.delimiter, self.source)
        _validate_columns(self.columns, self.source)
        object.__setattr__(self, 'columns', MappingProxyType(dict(self.columns)))

    # --- Public API ---
    @classmethod
    def default(cls) -> "ColumnSchema":
        """Schema for the packaged periodic table layout."""
        return _load_default_schema()

    @property
    def min_field_count(self) -> int:
        """Number of fields a row needs so that every column is present."""
        return max(self.columns.values()) + 1

    def index_of(self, key: str) -> int:
        if key not in self.columns:
            raise SchemaError(f"Unknown column '{key}' in schema {self.source}",
                              get_close_matches(key, list(self.columns), n=3))
        return self.columns[key]

    def value(self, fields: Sequence[str], key: str) -> str:
        """Field text for a column key."""
        return fields[self.index_of(key)]


def load_column_schema(path: Union[str, Path]) -> ColumnSchema:
    """
    Load and validate a column schema from a YAML file.
    Args:
        path: Path to the schema YAML file
    Returns:
        Validated ColumnSchema
    Raises:
        FileNotFoundError: If the schema file does not exist
        SchemaError: If the YAML is malformed or the schema is incomplete
    """
    path = Path(path)
    config = _load_yaml(path)
    if not isinstance(config, dict):
        raise SchemaError(f"Schema file {path} must contain a mapping at the root")
    columns = config.get(COLUMNS_KEY)
    if not isinstance(columns, dict):
        raise SchemaError(f"Schema file {path} requires a '{COLUMNS_KEY}' mapping")
    delimiter = config.get(DELIMITER_KEY, FileConstants.DEFAULT_DELIMITER)
    schema = ColumnSchema(columns=dict(columns), delimiter=delimiter, source=str(path))
    logger.info("Loaded column schema from %s (%d columns, delimiter %r)",
                path, len(schema.columns), schema.delimiter)
    return schema


@lru_cache(maxsize=1)
def _load_default_schema() -> ColumnSchema:
    return load_column_schema(DEFAULT_SCHEMA_PATH)


def _load_yaml(path: Path) -> Any:
    yaml = YAML(typ='safe')
    yaml.allow_duplicate_keys = False
    try:
        logger.debug("Loading schema YAML: %s", path)
        with open(path, 'r', encoding=FileConstants.DEFAULT_ENCODING) as f:
            return yaml.load(f)
    except FileNotFoundError as e:
        logger.error("Schema file not found: %s", path)
        raise FileNotFoundError(f"Schema file not found: {path}") from e
    except constructor.DuplicateKeyError as e:
        raise SchemaError(f"Duplicate key in {path}: {e}") from e
    except scanner.ScannerError as e:
        raise SchemaError(f"YAML syntax error in {path}: {e}") from e
    except YAMLError as e:
        raise SchemaError(f"Error parsing {path}: {e}") from e


def _validate_delimiter(delimiter: Any, source: str) -> None:
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise SchemaError(f"Delimiter in schema {source} must be a single character, got {delimiter!r}")


def _validate_columns(columns: Mapping[str, Any], source: str) -> None:
    unknown = [key for key in columns if key not in COLUMN_KEYS]
    if unknown:
        suggestions: List[str] = []
        for key in unknown:
            suggestions.extend(get_close_matches(str(key), COLUMN_KEYS, n=1))
        raise SchemaError(f"Unknown columns in schema {source}: {', '.join(map(str, unknown))}", suggestions)
    missing = [key for key in COLUMN_KEYS if key not in columns]
    if missing:
        raise SchemaError(f"Missing columns in schema {source}: {', '.join(missing)}")
    for key, index in columns.items():
        # bool is an int subclass; 'true' is never a column position
        if isinstance(index, bool) or not isinstance(index, int) or index < 0:
            raise SchemaError(f"Column '{key}' in schema {source} must be a non-negative integer, got {index!r}")
