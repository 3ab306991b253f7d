from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

from .events import Events
from .properties.base import Property


class PropertySheet:
    """
    Ordered set of properties describing one layer, as shown in an inspector.

    Property changes are re-published on the sheet, so a renderer can watch a
    whole layer:

        sheet = PropertySheet("Rectangle", [Int("x", 0), Colour("fill", ColourWhite)])
        sheet.on("change:fill", lambda colour: redraw(colour))
        sheet.on("change", lambda name, value: print(name, value))
    """

    def __init__(self, label: str, properties: Optional[Iterable[Property]] = None):
        self.sheet_id: Optional[str] = None
        self.label = label
        self._properties: Dict[str, Property] = {}
        self._relays: Dict[str, Callable] = {}
        self._events = Events()
        for prop in properties or []:
            self.add(prop)

    def add(self, prop: Property) -> Property:
        name = prop.get_name()
        if name in self._properties:
            raise ValueError(f"Duplicate property '{name}' on {self.label}")

        def relay(value, name=name):
            self._events.trigger(f"change:{name}", value)
            self._events.trigger("change", name, value)

        prop.on("change", relay)
        self._properties[name] = prop
        self._relays[name] = relay
        return prop

    def remove(self, name: str) -> Property:
        prop = self._properties.pop(name)
        prop.off("change", self._relays.pop(name))
        return prop

    def get(self, name: str) -> Property:
        if name not in self._properties:
            raise KeyError(f"Property not found: {name}")
        return self._properties[name]

    def names(self) -> List[str]:
        return list(self._properties.keys())

    def values(self) -> Dict[str, Any]:
        return {name: prop.serialize() for name, prop in self._properties.items()}

    def __iter__(self) -> Iterator[Property]:
        return iter(list(self._properties.values()))

    def __len__(self) -> int:
        return len(self._properties)

    def __contains__(self, name: str) -> bool:
        return name in self._properties

    def on(self, event: str, callback: Callable) -> Callable:
        return self._events.on(event, callback)

    def off(self, event: Optional[str] = None, callback: Optional[Callable] = None):
        self._events.off(event, callback)

    def get_schema(self) -> dict:
        """Return the sheet's schema for the UI."""
        return {
            "sheet_id": self.sheet_id,
            "label": self.label,
            "properties": [prop.to_spec() for prop in self._properties.values()],
        }
