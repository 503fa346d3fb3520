"""Custom exceptions for vseprlib core functionality."""
import logging

from vseprlib.data.constants import ErrorMessages

logger = logging.getLogger(__name__)


class ElementDataError(Exception):
    """Base exception for all element data errors."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("%s raised: %s", type(self).__name__, message)


class ElementNotFoundError(ElementDataError, KeyError):
    """Exception raised when a symbol is not present in the registry."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(ErrorMessages.ELEMENT_NOT_FOUND.format(symbol=symbol))

    def __str__(self) -> str:
        # KeyError quotes its argument otherwise
        return self.args[0]
