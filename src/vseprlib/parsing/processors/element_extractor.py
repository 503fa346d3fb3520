import logging
from typing import Optional, Sequence, Tuple

from vseprlib.core.elements import ElementRecord, is_geometry_exception
from vseprlib.data.constants import ErrorMessages, FileConstants, ProcessingConstants
from vseprlib.parsing.config.column_schema import ColumnSchema
from vseprlib.parsing.config.schema_keys import (
    ATOMIC_NUMBER_KEY, ATOMIC_RADIUS_KEY, COLOR_KEY, DOUBLE_BOND_RADIUS_KEY, ELECTRON_CONFIGURATION_KEY,
    ELECTRONEGATIVITY_KEY, NAME_KEY, PERIOD_NUMBER_KEY, SINGLE_BOND_RADIUS_A_KEY, SINGLE_BOND_RADIUS_B_KEY,
    SYMBOL_KEY, TRIPLE_BOND_RADIUS_KEY, VALENCE_HINT_KEY, VAN_DER_WAALS_RADIUS_KEY)
from vseprlib.parsing.processors.valence import derive_valence_electrons
from vseprlib.parsing.utils.conversions import safe_float, safe_int
from vseprlib.parsing.validation.errors import MalformedColorError, RowFormatError

logger = logging.getLogger(__name__)

RGB = Tuple[float, float, float]


def decode_color(value: str, line_number: Optional[int] = None) -> RGB:
    """
    Decode a CPK color stored as ``"r-g-b"`` with 0-255 channels.
    Args:
        value: Raw color field, e.g. ``"255-0-128"``
        line_number: Source line, used in error messages
    Returns:
        (red, green, blue) normalized to [0, 1]; black for a blank field
    Raises:
        MalformedColorError: If the field is not exactly three 0-255 integers
    """
    if not value.strip():
        logger.debug("Blank color field, using black")
        return 0.0, 0.0, 0.0
    parts = value.split(FileConstants.COLOR_DELIMITER)
    if len(parts) != ProcessingConstants.COLOR_CHANNEL_COUNT:
        raise MalformedColorError(value, f"expected {ProcessingConstants.COLOR_CHANNEL_COUNT} channels "
                                         f"separated by '{FileConstants.COLOR_DELIMITER}', got {len(parts)}",
                                  line_number)
    channels = []
    for part in parts:
        part = part.strip()
        if not part.isdigit() or not part.isascii():
            raise MalformedColorError(value, f"channel {part!r} is not an integer", line_number)
        channel = int(part)
        if channel > ProcessingConstants.COLOR_CHANNEL_MAX:
            raise MalformedColorError(value, f"channel {channel} exceeds "
                                             f"{ProcessingConstants.COLOR_CHANNEL_MAX:g}", line_number)
        channels.append(channel / ProcessingConstants.COLOR_CHANNEL_MAX)
    return channels[0], channels[1], channels[2]


def average_bond_radius(first: str, second: str) -> float:
    """Mean of the two single-bond radius measurements, each parsed safely."""
    return (safe_float(first, SINGLE_BOND_RADIUS_A_KEY) + safe_float(second, SINGLE_BOND_RADIUS_B_KEY)) / 2.0


class ElementExtractor:
    """Turns the tokenized fields of one row into an ElementRecord."""

    def __init__(self, schema: Optional[ColumnSchema] = None) -> None:
        self.schema = schema or ColumnSchema.default()
        logger.debug("ElementExtractor initialized with schema %s", self.schema.source)

    # --- Public API ---
    def extract(self, fields: Sequence[str], line_number: Optional[int] = None) -> ElementRecord:
        """
        Build a record from one admitted row.

        Numeric fields that cannot be parsed become 0 rather than failing the
        row; only a short row or a malformed color is an error.
        Args:
            fields: Tokenized row
            line_number: Source line, used in error messages
        Returns:
            Fully populated ElementRecord
        Raises:
            RowFormatError: If the row has fewer fields than the schema requires
            MalformedColorError: If the color field is not a 'r-g-b' triplet
        """
        self._check_field_count(fields, line_number)
        name = self._text(fields, NAME_KEY)
        symbol = self._text(fields, SYMBOL_KEY)
        configuration = self._text(fields, ELECTRON_CONFIGURATION_KEY)
        record = ElementRecord(
            name=name,
            symbol=symbol,
            atomic_number=self._int(fields, ATOMIC_NUMBER_KEY),
            period_number=self._int(fields, PERIOD_NUMBER_KEY),
            electronegativity=self._float(fields, ELECTRONEGATIVITY_KEY),
            atomic_radius=self._float(fields, ATOMIC_RADIUS_KEY),
            bond_radii=self._bond_radii(fields),
            van_der_waals_radius=self._float(fields, VAN_DER_WAALS_RADIUS_KEY)
            / ProcessingConstants.VAN_DER_WAALS_SCALE,
            color=decode_color(self._text(fields, COLOR_KEY), line_number),
            valence_electron_count=derive_valence_electrons(self._int(fields, VALENCE_HINT_KEY), configuration),
            is_geometry_exception=is_geometry_exception(name),
            electron_configuration=configuration,
        )
        logger.debug("Extracted %s (%s): Z=%d, valence=%d", record.symbol, record.name,
                     record.atomic_number, record.valence_electron_count)
        return record

    # --- Field access ---
    def _check_field_count(self, fields: Sequence[str], line_number: Optional[int]) -> None:
        required = self.schema.min_field_count
        if len(fields) < required:
            raise RowFormatError(ErrorMessages.TOO_FEW_FIELDS.format(count=len(fields), required=required),
                                 line_number)

    def _text(self, fields: Sequence[str], key: str) -> str:
        return self.schema.value(fields, key).strip()

    def _int(self, fields: Sequence[str], key: str) -> int:
        return safe_int(self.schema.value(fields, key), key)

    def _float(self, fields: Sequence[str], key: str) -> float:
        return safe_float(self.schema.value(fields, key), key)

    def _bond_radii(self, fields: Sequence[str]) -> Tuple[float, float, float]:
        single = average_bond_radius(self.schema.value(fields, SINGLE_BOND_RADIUS_A_KEY),
                                     self.schema.value(fields, SINGLE_BOND_RADIUS_B_KEY))
        return single, self._float(fields, DOUBLE_BOND_RADIUS_KEY), self._float(fields, TRIPLE_BOND_RADIUS_KEY)
