"""Canvas layers whose geometry and styling are exposed as properties."""

from typing import Any, Dict, List, Optional

from ..core.controls import ControlFactory
from ..core.properties import Int
from ..core.sheet import PropertySheet

# Pebble screen
SCREEN_WIDTH = 144
SCREEN_HEIGHT = 168


class Layer:
    """
    Base class for canvas layers.

    Each layer owns a PropertySheet. Editing any property marks the layer
    dirty so the canvas redraws it on the next render().

    Example:
        class Box(Layer):
            label = "Box"

            def build_properties(self, factory):
                self.fill = self.sheet.add(Colour("fill", ColourBlack, factory=factory))

            def draw(self):
                return {"shape": "rect", "fill": self.fill.get_value().name}
    """

    label: str = "Layer"

    def __init__(self, x: int = 0, y: int = 0, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT,
                 factory: Optional[ControlFactory] = None):
        self.sheet = PropertySheet(self.label)
        self.x = self.sheet.add(Int("x", x, -SCREEN_WIDTH, SCREEN_WIDTH, factory=factory))
        self.y = self.sheet.add(Int("y", y, -SCREEN_HEIGHT, SCREEN_HEIGHT, factory=factory))
        self.width = self.sheet.add(Int("width", width, 0, SCREEN_WIDTH, factory=factory))
        self.height = self.sheet.add(Int("height", height, 0, SCREEN_HEIGHT, factory=factory))
        self.build_properties(factory)
        self.dirty = True
        self.sheet.on("change", self._on_property_change)

    def build_properties(self, factory: Optional[ControlFactory]):
        """Add layer-specific properties to self.sheet."""
        pass

    def _on_property_change(self, name: str, value: Any):
        self.dirty = True

    def frame(self) -> Dict[str, int]:
        return {
            "x": self.x.get_value(),
            "y": self.y.get_value(),
            "width": self.width.get_value(),
            "height": self.height.get_value(),
        }

    def draw(self) -> Dict[str, Any]:
        raise NotImplementedError("Each layer must implement draw")

    def render(self) -> Dict[str, Any]:
        command = {"layer": self.label, "frame": self.frame()}
        command.update(self.draw())
        self.dirty = False
        return command


class Canvas:
    """Ordered stack of layers, bottom first."""

    def __init__(self):
        self.layers: List[Layer] = []

    def add(self, layer: Layer) -> Layer:
        self.layers.append(layer)
        return layer

    def remove(self, layer: Layer):
        self.layers.remove(layer)

    @property
    def needs_redraw(self) -> bool:
        return any(layer.dirty for layer in self.layers)

    def render(self) -> List[Dict[str, Any]]:
        return [layer.render() for layer in self.layers]
