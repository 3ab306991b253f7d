from .base import Property, apply_value
from .kinds import Int, Text, Colour, parse_int

__all__ = [
    "Property",
    "apply_value",
    "Int",
    "Text",
    "Colour",
    "parse_int",
]
