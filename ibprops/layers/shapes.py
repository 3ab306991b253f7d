"""Concrete layers offered by the interface builder."""

from typing import Any, Dict, Optional

from ..core.colours import ColourBlack, ColourClear, ColourWhite
from ..core.controls import ControlFactory
from ..core.properties import Colour, Int, Text
from .base import Layer


class RectLayer(Layer):
    """Filled rectangle."""

    label = "Rectangle"

    def build_properties(self, factory: Optional[ControlFactory]):
        self.fill = self.sheet.add(Colour("fill", ColourBlack, factory=factory))

    def draw(self) -> Dict[str, Any]:
        return {"shape": "rect", "fill": self.fill.get_value().name}


class CircleLayer(Layer):
    """Filled circle centred in the layer frame."""

    label = "Circle"

    def build_properties(self, factory: Optional[ControlFactory]):
        self.radius = self.sheet.add(Int("radius", 20, 0, 72, factory=factory))
        self.fill = self.sheet.add(Colour("fill", ColourBlack, factory=factory))

    def draw(self) -> Dict[str, Any]:
        return {
            "shape": "circle",
            "radius": self.radius.get_value(),
            "fill": self.fill.get_value().name,
        }


class TextLayer(Layer):
    """Single text block with foreground and background colours."""

    label = "Text"

    def build_properties(self, factory: Optional[ControlFactory]):
        self.text = self.sheet.add(Text("text", "Text layer", factory=factory))
        self.text_colour = self.sheet.add(Colour("text_colour", ColourBlack, factory=factory))
        self.background_colour = self.sheet.add(Colour("background_colour", ColourWhite, factory=factory))

    def draw(self) -> Dict[str, Any]:
        background = self.background_colour.get_value()
        return {
            "shape": "text",
            "text": self.text.get_value(),
            "colour": self.text_colour.get_value().name,
            # Clear backgrounds are not painted
            "background": None if background == ColourClear else background.name,
        }
