import logging
from typing import List, Optional

from vseprlib.core.elements import ElementRecord
from vseprlib.data.constants import ProcessingConstants
from vseprlib.parsing.validation.errors import RecordValidationError

logger = logging.getLogger(__name__)


def find_record_violations(record: ElementRecord) -> List[str]:
    """Return a description of every invariant the record breaks."""
    violations = []
    if not record.symbol:
        violations.append("symbol is empty")
    if record.atomic_number < 0:
        violations.append(f"atomic_number is negative ({record.atomic_number})")
    if record.period_number < 0:
        violations.append(f"period_number is negative ({record.period_number})")
    if record.valence_electron_count < 0:
        violations.append(f"valence_electron_count is negative ({record.valence_electron_count})")
    if len(record.bond_radii) != ProcessingConstants.BOND_ORDER_COUNT:
        violations.append(f"expected {ProcessingConstants.BOND_ORDER_COUNT} bond radii, "
                          f"got {len(record.bond_radii)}")
    for order, radius in enumerate(record.bond_radii, start=1):
        if radius < 0:
            violations.append(f"bond radius of order {order} is negative ({radius})")
    if len(record.color) != ProcessingConstants.COLOR_CHANNEL_COUNT:
        violations.append(f"expected {ProcessingConstants.COLOR_CHANNEL_COUNT} color channels, "
                          f"got {len(record.color)}")
    for channel in record.color:
        if not 0.0 <= channel <= 1.0:
            violations.append(f"color channel {channel} outside [0, 1]")
    return violations


def validate_element_record(record: ElementRecord, line_number: Optional[int] = None) -> None:
    """
    Check an extracted record against the element data model invariants.
    Args:
        record: Record produced by the extractor
        line_number: Source line, used in the error message
    Raises:
        RecordValidationError: If any invariant is violated
    """
    violations = find_record_violations(record)
    if violations:
        raise RecordValidationError(record.symbol, violations, line_number)
    logger.debug("Record '%s' passed validation", record.symbol)
