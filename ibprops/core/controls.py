"""
Headless widget toolkit for property controls.

A control holds the text it displays, exposes the toolkit's native
"user changed this" signals and renders itself to a JSON-ready spec that a
front end can turn into real widgets. Programmatic display writes never fire
user signals; only user_input() does.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Sequence

from .events import Events


@dataclass(frozen=True)
class Option:
    """One entry of a selection control."""
    value: str
    label: str


class Control:
    """Base for all interactive controls bound to a property."""

    tag: str = "input"
    input_type: Optional[str] = None
    # Native signals a user edit can raise on this kind of control
    user_events: Sequence[str] = ("change",)

    def __init__(self, classes: Iterable[str] = ()):
        self.classes: List[str] = list(classes)
        self.attrs: dict = {}
        self._value: Optional[str] = ""
        self._events = Events()

    def get_value(self) -> Optional[str]:
        """Return the currently displayed value."""
        return self._value

    def set_value(self, value: Any):
        """Programmatically set the displayed value. Does not raise user signals."""
        self._value = "" if value is None else str(value)

    def on(self, event: str, callback: Callable) -> Callable:
        return self._events.on(event, callback)

    def off(self, event: Optional[str] = None, callback: Optional[Callable] = None):
        self._events.off(event, callback)

    def user_input(self, raw: Any, event: str = "change"):
        """Simulate the toolkit delivering a user edit: update the display, then signal."""
        if event not in self.user_events:
            raise ValueError(f"{self.__class__.__name__} does not raise '{event}' events")
        self.set_value(raw)
        self._events.trigger(event)

    def to_spec(self) -> dict:
        spec = {
            "tag": self.tag,
            "classes": list(self.classes),
            "attrs": dict(self.attrs),
            "value": self._value,
        }
        if self.input_type:
            spec["type"] = self.input_type
        return spec


class NumberInput(Control):
    """Numeric input; min/max attributes are only exposed when given."""

    input_type = "number"

    def __init__(self, min_val: Optional[float] = None, max_val: Optional[float] = None,
                 classes: Iterable[str] = ()):
        super().__init__(classes)
        if min_val is not None:
            self.attrs["min"] = min_val
        if max_val is not None:
            self.attrs["max"] = max_val


class TextInput(Control):
    """Single-line text input. Reports both key releases and change/blur."""

    input_type = "text"
    user_events = ("keyup", "change")


class Select(Control):
    """Selection list over a fixed set of options."""

    tag = "select"

    def __init__(self, options: Iterable[Option], classes: Iterable[str] = ()):
        super().__init__(classes)
        self.options: List[Option] = list(options)
        self._value = self.options[0].value if self.options else None

    def set_value(self, value: Any):
        # Unknown values leave nothing selected, like a DOM <select>
        value = None if value is None else str(value)
        self._value = value if any(o.value == value for o in self.options) else None

    def to_spec(self) -> dict:
        spec = super().to_spec()
        spec["options"] = [{"value": o.value, "label": o.label} for o in self.options]
        return spec


class ControlFactory:
    """
    Builds the controls properties bind to.

    Subclass and override to back properties with another toolkit; each method
    must return an object with the Control interface.
    """

    def number_input(self, min_val: Optional[float] = None, max_val: Optional[float] = None,
                     classes: Iterable[str] = ()) -> Control:
        return NumberInput(min_val, max_val, classes)

    def text_input(self, classes: Iterable[str] = ()) -> Control:
        return TextInput(classes)

    def select(self, options: Iterable[Option], classes: Iterable[str] = ()) -> Control:
        return Select(options, classes)


default_factory = ControlFactory()
