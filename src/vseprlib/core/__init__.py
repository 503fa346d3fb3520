"""
Core data structures for element data.

This module contains the element record, the read-only registry that
downstream geometry and rendering code queries, and the base exceptions.
"""

from .elements import ElementRecord, make_lone_pair, is_geometry_exception
from .registry import ElementRegistry
from .exceptions import ElementDataError, ElementNotFoundError

__all__ = [
    "ElementRecord",
    "ElementRegistry",
    "make_lone_pair",
    "is_geometry_exception",
    "ElementDataError",
    "ElementNotFoundError"
]
