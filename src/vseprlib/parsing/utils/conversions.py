import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

_INT_PREFIX = re.compile(r'[0-9]+')
_FLOAT_PREFIX = re.compile(r'[0-9]+(?:\.[0-9]*)?(?:[eE][+-]?[0-9]+)?')


def safe_int(text: str, field_name: Optional[str] = None) -> int:
    """
    Convert the leading digits of a field to an integer, defaulting to 0.

    A field whose first character is not a decimal digit (empty, placeholder,
    sign, leading whitespace) converts to 0. Such a 0 cannot be told apart from
    a literal zero in the source.
    Args:
        text: Raw field text
        field_name: Column name reported on the diagnostic channel
    Returns:
        Parsed integer or 0
    """
    match = _INT_PREFIX.match(text)
    if match is None:
        _report_substitution(text, field_name)
        return 0
    return int(match.group())


def safe_float(text: str, field_name: Optional[str] = None) -> float:
    """
    Convert the leading number of a field to a float, defaulting to 0.0.

    Same contract as safe_int; the longest prefix of the form ``12``, ``12.5``
    or ``1.25e2`` is converted and anything after it is ignored.
    """
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        _report_substitution(text, field_name)
        return 0.0
    return float(match.group())


def _report_substitution(text: str, field_name: Optional[str]) -> None:
    if text:
        logger.debug("Non-numeric value %r in field '%s', substituting 0", text, field_name or "<unnamed>")
    else:
        logger.debug("Empty field '%s', substituting 0", field_name or "<unnamed>")
