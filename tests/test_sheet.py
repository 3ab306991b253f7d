"""Tests for property sheets, the sheet registry and canvas layers."""

import pytest

from ibprops.core.colours import ColourBlack, ColourClear, ColourWhite
from ibprops.core.properties import Colour, Int, Text
from ibprops.core.registry import (
    clear_sheet_registry, get_all_sheets, get_sheet, register_sheet, unregister_sheet,
)
from ibprops.core.sheet import PropertySheet
from ibprops.layers.base import Canvas, SCREEN_WIDTH
from ibprops.layers.shapes import CircleLayer, RectLayer, TextLayer


@pytest.fixture()
def sheet() -> PropertySheet:
    return PropertySheet("Box", [
        Int("opacity", 50, 0, 100),
        Text("title", "hello"),
        Colour("fill", ColourWhite),
    ])


class TestPropertySheet:
    def test_keeps_insertion_order(self, sheet: PropertySheet) -> None:
        assert sheet.names() == ["opacity", "title", "fill"]
        assert [p.get_name() for p in sheet] == ["opacity", "title", "fill"]
        assert len(sheet) == 3
        assert "fill" in sheet

    def test_get_unknown_raises_key_error(self, sheet: PropertySheet) -> None:
        with pytest.raises(KeyError):
            sheet.get("missing")

    def test_duplicate_names_rejected(self, sheet: PropertySheet) -> None:
        with pytest.raises(ValueError):
            sheet.add(Text("title"))

    def test_relays_property_changes(self, sheet: PropertySheet) -> None:
        named, fills = [], []
        sheet.on("change", lambda name, value: named.append((name, value)))
        sheet.on("change:fill", fills.append)
        sheet.get("fill").set_value(ColourBlack)
        sheet.get("opacity").set_value(500)
        assert fills == [ColourBlack]
        assert named == [("fill", ColourBlack), ("opacity", 100)]

    def test_no_relay_without_change(self, sheet: PropertySheet) -> None:
        named = []
        sheet.on("change", lambda name, value: named.append(name))
        sheet.get("title").set_value("hello")
        assert named == []

    def test_removed_property_stops_relaying(self, sheet: PropertySheet) -> None:
        named = []
        sheet.on("change", lambda name, value: named.append(name))
        prop = sheet.remove("title")
        prop.set_value("bye")
        assert named == []
        assert "title" not in sheet

    def test_values_serialize_colours(self, sheet: PropertySheet) -> None:
        assert sheet.values() == {"opacity": 50, "title": "hello", "fill": "GColorWhite"}

    def test_schema(self, sheet: PropertySheet) -> None:
        schema = sheet.get_schema()
        assert schema["label"] == "Box"
        assert [p["key"] for p in schema["properties"]] == ["opacity", "title", "fill"]
        assert schema["properties"][2]["control"]["tag"] == "select"


class TestRegistry:
    def setup_method(self) -> None:
        clear_sheet_registry()

    def test_ids_are_unique_and_monotonic(self) -> None:
        a, b = PropertySheet("Box"), PropertySheet("Box")
        assert register_sheet(a) == "Box_0"
        assert register_sheet(b) == "Box_1"
        assert a.sheet_id == "Box_0"
        assert get_sheet("Box_1") is b

    def test_unregister_and_clear(self) -> None:
        sheet_id = register_sheet(PropertySheet("Box"))
        unregister_sheet(sheet_id)
        unregister_sheet(sheet_id)
        assert get_sheet(sheet_id) is None
        register_sheet(PropertySheet("Box"))
        clear_sheet_registry()
        assert get_all_sheets() == {}
        assert register_sheet(PropertySheet("Box")) == "Box_0"


class TestLayers:
    def test_rect_layer_redraws_on_fill_change(self) -> None:
        layer = RectLayer(0, 0, 20, 10)
        assert layer.dirty
        first = layer.render()
        assert first == {
            "layer": "Rectangle",
            "frame": {"x": 0, "y": 0, "width": 20, "height": 10},
            "shape": "rect",
            "fill": "GColorBlack",
        }
        assert not layer.dirty
        layer.fill.get_node().user_input(ColourWhite.name)
        assert layer.dirty
        assert layer.render()["fill"] == "GColorWhite"

    def test_unchanged_value_does_not_dirty(self) -> None:
        layer = RectLayer()
        layer.render()
        layer.fill.set_value(ColourBlack)
        assert not layer.dirty

    def test_geometry_is_clamped_to_screen(self) -> None:
        layer = RectLayer()
        layer.width.set_value(1000)
        assert layer.frame()["width"] == SCREEN_WIDTH

    def test_text_layer_clear_background_is_not_painted(self) -> None:
        layer = TextLayer()
        layer.background_colour.set_value(ColourClear)
        layer.text.get_node().user_input("Hi", event="keyup")
        command = layer.render()
        assert command["background"] is None
        assert command["text"] == "Hi"

    def test_canvas_tracks_dirty_layers(self) -> None:
        canvas = Canvas()
        circle = canvas.add(CircleLayer())
        canvas.add(TextLayer())
        assert canvas.needs_redraw
        commands = canvas.render()
        assert [c["shape"] for c in commands] == ["circle", "text"]
        assert not canvas.needs_redraw
        circle.radius.set_value(999)
        assert canvas.needs_redraw
        assert circle.radius.get_value() == 72
