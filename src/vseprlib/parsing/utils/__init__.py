from .conversions import safe_int, safe_float

__all__ = [
    "safe_int",
    "safe_float"
]
