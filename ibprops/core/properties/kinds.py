import math
import numbers
import re
from typing import Any, Optional

from ..colours import COLOURS, ColourWhite, colour_mapping, is_colour
from ..colours import Colour as ColourToken
from ..controls import Control, ControlFactory, Option
from .base import Property, apply_value


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_int(text: Optional[str]) -> Optional[int]:
    """
    Parse the leading base-10 integer of a control's text.

    "12px" -> 12, " 3.7" -> 3, "abc" -> None, "" -> None.
    """
    if text is None:
        return None
    match = _LEADING_INT.match(text)
    if not match:
        return None
    return int(match.group(1))


class Int(Property):
    """Integer property clamped to [min_val, max_val] (inclusive)."""

    kind = "int"

    def __init__(
        self,
        name: str,
        value: float = 0,
        min_val: float = -math.inf,
        max_val: float = math.inf,
        factory: Optional[ControlFactory] = None,
    ):
        if min_val > max_val:
            raise ValueError(f"{name}: min {min_val} is greater than max {max_val}")
        self._name = name
        self._min = min_val
        self._max = max_val
        initial = self._clamp(value)
        if initial is None:
            raise ValueError(f"{name} needs a finite initial value, got {value}")
        super().__init__(name, initial, factory)

    @property
    def min_val(self) -> float:
        return self._min

    @property
    def max_val(self) -> float:
        return self._max

    def _clamp(self, candidate: Any) -> Optional[int]:
        """Clamp then truncate toward zero. None means the candidate is not a finite number."""
        if isinstance(candidate, bool) or not isinstance(candidate, numbers.Real):
            raise TypeError(f"{self._name} must be a number, got {candidate!r}")
        if math.isnan(candidate):
            return None
        clamped = max(self._min, min(self._max, candidate))
        if math.isinf(clamped):
            return None
        return int(clamped)

    def set_value(self, value: Any):
        """Sets the value, clamped between min and max and truncated to an integer."""
        clamped = self._clamp(value)
        if clamped is not None:
            apply_value(self, clamped)
        self._node.set_value(self._value)

    def _generate_node(self) -> Control:
        node = self._factory.number_input(
            None if math.isinf(self._min) else self._min,
            None if math.isinf(self._max) else self._max,
            classes=("ib-property", "ib-integer"),
        )
        node.set_value(self._value)
        node.on("change", self._handle_change)
        return node

    def _handle_change(self):
        val = parse_int(self._node.get_value())
        if val is not None and val != self._value:
            self.set_value(val)
        else:
            # Unparseable or equivalent text: show the canonical value again
            self._node.set_value(self._value)

    def coerce(self, raw: Any) -> Any:
        if isinstance(raw, str):
            parsed = parse_int(raw)
            if parsed is None:
                raise ValueError(f"{self._name} must be an integer, got {raw!r}")
            return parsed
        return raw

    def to_spec(self) -> dict:
        spec = super().to_spec()
        spec["min"] = None if math.isinf(self._min) else self._min
        spec["max"] = None if math.isinf(self._max) else self._max
        return spec


class Text(Property):
    """Free text property."""

    kind = "text"

    def __init__(self, name: str, value: str = "", factory: Optional[ControlFactory] = None):
        self._name = name
        self._check(value)
        super().__init__(name, value, factory)

    def _check(self, value: Any):
        if not isinstance(value, str):
            raise TypeError(f"{self._name} must be a string, got {value!r}")

    def set_value(self, value: Any):
        self._check(value)
        apply_value(self, value)
        self._node.set_value(self._value)

    def _generate_node(self) -> Control:
        node = self._factory.text_input(classes=("ib-property", "ib-text"))
        node.set_value(self._value)
        # keyup for live typing, change for blur and pasted edits
        node.on("keyup", self._handle_change)
        node.on("change", self._handle_change)
        return node

    def _handle_change(self):
        val = self._node.get_value()
        if val != self._value:
            self.set_value(val)

    def coerce(self, raw: Any) -> Any:
        self._check(raw)
        return raw


class Colour(Property):
    """Property restricted to the fixed colour tokens."""

    kind = "colour"

    def __init__(self, name: str, value: ColourToken = ColourWhite, factory: Optional[ControlFactory] = None):
        self._name = name
        self._check(value)
        super().__init__(name, value, factory)

    def _check(self, value: Any):
        if not is_colour(value):
            names = [c.name for c in COLOURS]
            raise ValueError(f"{self._name} must be one of {names}, got {value!r}")

    def set_value(self, value: Any):
        self._check(value)
        apply_value(self, value)
        self._node.set_value(self._value.name)

    def _generate_node(self) -> Control:
        node = self._factory.select(
            [Option(colour.name, colour.display) for colour in COLOURS],
            classes=("ib-property", "ib-colour"),
        )
        node.set_value(self._value.name)
        node.on("change", self._handle_change)
        return node

    def _handle_change(self):
        val = colour_mapping().get(self._node.get_value())
        if val is None:
            self._node.set_value(self._value.name)
        elif val != self._value:
            self.set_value(val)

    def coerce(self, raw: Any) -> Any:
        if isinstance(raw, dict):
            raw = raw.get("name")
        mapping = colour_mapping()
        if raw not in mapping:
            raise ValueError(f"{self._name} must be one of {list(mapping)}, got {raw!r}")
        return mapping[raw]

    def serialize(self) -> Any:
        return self._value.name

    def to_spec(self) -> dict:
        spec = super().to_spec()
        spec["options"] = [colour.to_spec() for colour in COLOURS]
        return spec
