"""
Fixed colour tokens used by Colour properties and the layers that render them.
"""

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class Colour:
    """A palette entry: machine name plus the label shown to users."""
    name: str
    display: str

    def to_spec(self) -> dict:
        return {"name": self.name, "display": self.display}


ColourWhite = Colour("GColorWhite", "White")
ColourBlack = Colour("GColorBlack", "Black")
ColourClear = Colour("GColorClear", "Clear")

# Option order in selection controls
COLOURS: Tuple[Colour, ...] = (ColourWhite, ColourBlack, ColourClear)


def colour_mapping() -> Dict[str, Colour]:
    """Build a fresh name -> token mapping."""
    return {colour.name: colour for colour in COLOURS}


def is_colour(value) -> bool:
    return value in COLOURS
