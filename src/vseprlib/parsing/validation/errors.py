from typing import List, Optional

from vseprlib.core.exceptions import ElementDataError
from vseprlib.data.constants import ErrorMessages


class SourceUnavailableError(ElementDataError):
    """Exception raised when the element data source cannot be opened or read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(ErrorMessages.SOURCE_UNAVAILABLE.format(path=path, reason=reason))


class RowFormatError(ElementDataError):
    """Exception for rows that passed admission but cannot be extracted."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)


class MalformedColorError(RowFormatError):
    """Exception for color fields that are not a 'r-g-b' triplet."""

    def __init__(self, value: str, reason: str, line_number: Optional[int] = None):
        self.value = value
        super().__init__(ErrorMessages.MALFORMED_COLOR.format(value=value, reason=reason), line_number)


class RecordValidationError(RowFormatError):
    """Exception for extracted records violating a data model invariant."""

    def __init__(self, symbol: str, violations: List[str], line_number: Optional[int] = None):
        self.symbol = symbol
        self.violations = violations
        message = f"Invalid record for '{symbol}': " + "; ".join(violations)
        super().__init__(message, line_number)


class SchemaError(ElementDataError):
    """Exception for invalid column schema configurations."""

    def __init__(self, message: str, suggestions: Optional[List[str]] = None):
        self.suggestions = suggestions or []
        if self.suggestions:
            message += f"\nDid you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)
