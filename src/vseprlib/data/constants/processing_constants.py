from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class ProcessingConstants:
    """Processing constants used throughout the element data parser."""
    # Color decoding
    COLOR_CHANNEL_MAX: Final[float] = 255.0
    COLOR_CHANNEL_COUNT: Final[int] = 3
    # Radii
    VAN_DER_WAALS_SCALE: Final[float] = 100.0  # Source stores vdW radius x100
    BOND_ORDER_COUNT: Final[int] = 3  # single, double, triple
    # Valence derivation
    VALENCE_GROUP_THRESHOLD: Final[int] = 12  # Hints above this are groups 13-18
    VALENCE_GROUP_OFFSET: Final[int] = 10
    DIRECT_VALENCE_MAX: Final[int] = 2  # Hints 1 and 2 are used as-is


@dataclass(frozen=True)
class FileConstants:
    """File handling constants."""
    DEFAULT_ENCODING: Final[str] = 'utf-8'
    DEFAULT_DELIMITER: Final[str] = ','
    CONFIGURATION_DELIMITER: Final[str] = ' '
    COLOR_DELIMITER: Final[str] = '-'
    LINE_TERMINATORS: Final[str] = '\r\n'


@dataclass(frozen=True)
class ElementConstants:
    """Reserved registry entries and element special cases."""
    LONE_PAIR_SYMBOL: Final[str] = 'LP'
    LONE_PAIR_NAME: Final[str] = 'Lone pair'
    # Elements whose bonding geometry is special-cased by the VSEPR modeler
    GEOMETRY_EXCEPTION_NAMES: Final[frozenset] = frozenset({'beryllium', 'boron'})


@dataclass(frozen=True)
class ErrorMessages:
    """Standardized error message templates."""
    SOURCE_UNAVAILABLE: Final[str] = "Unable to read element data source '{path}': {reason}"
    TOO_FEW_FIELDS: Final[str] = "Row has {count} fields, at least {required} are required"
    MALFORMED_COLOR: Final[str] = "Malformed color '{value}': {reason}"
    ELEMENT_NOT_FOUND: Final[str] = "Element with symbol '{symbol}' not found"
