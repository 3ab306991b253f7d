from typing import Any, Callable, Optional

from ..controls import Control, ControlFactory, default_factory
from ..events import Events


def apply_value(prop: "Property", value: Any) -> bool:
    """
    Store a validated value on a property and notify observers.

    Every mutation goes through here. Returns True when the value changed and
    a 'change' event was triggered, False when it was equal to the stored one.
    """
    if value == prop._value:
        return False
    prop._value = value
    prop.trigger("change", value)
    return True


class Property:
    """
    Named, observable value paired with exactly one control.

    Subclasses supply _generate_node() to build and wire their control, and a
    set_value() that validates, calls apply_value() and re-syncs the control.
    """

    kind: str = "property"

    def __init__(self, name: str, value: Any, factory: Optional[ControlFactory] = None):
        self._name = name
        self._value = value
        self._events = Events()
        self._factory = factory or default_factory
        self._node = self._generate_node()

    def get_name(self) -> str:
        return self._name

    def get_value(self) -> Any:
        return self._value

    def set_value(self, value: Any):
        apply_value(self, value)

    def get_node(self) -> Control:
        return self._node

    def _generate_node(self) -> Control:
        raise NotImplementedError("_generate_node not implemented.")

    # Event channel

    def on(self, event: str, callback: Callable) -> Callable:
        return self._events.on(event, callback)

    def once(self, event: str, callback: Callable) -> Callable:
        return self._events.once(event, callback)

    def off(self, event: Optional[str] = None, callback: Optional[Callable] = None):
        self._events.off(event, callback)

    def trigger(self, event: str, *args: Any):
        self._events.trigger(event, *args)

    # Wire format helpers used by the server

    def coerce(self, raw: Any) -> Any:
        """Convert a JSON value into a set_value() candidate."""
        return raw

    def serialize(self) -> Any:
        """JSON-ready form of the current value."""
        return self._value

    def to_spec(self) -> dict:
        return {
            "key": self._name,
            "kind": self.kind,
            "value": self.serialize(),
            "control": self._node.to_spec(),
        }

    def dispose(self):
        """Drop observers and detach the control's listeners."""
        self._events.off()
        self._node.off()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._name!r}, {self._value!r})"
