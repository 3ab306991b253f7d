"""
main.py - Entry point for the IB property inspector.
"""

from ibprops.layers.base import Canvas
from ibprops.layers.shapes import CircleLayer, RectLayer, TextLayer
from ibprops.server.server import init_server, run_server


def create_canvas() -> Canvas:
    """Create a canvas with one layer of each kind."""
    canvas = Canvas()
    canvas.add(RectLayer(0, 0, 144, 168))
    canvas.add(CircleLayer(52, 64, 40, 40))
    canvas.add(TextLayer(10, 10, 124, 30))
    return canvas


def watch_colours(layer):
    """Redraw a layer whenever one of its colours changes."""
    for prop in layer.sheet:
        if prop.kind == "colour":
            prop.on("change", lambda colour, name=prop.get_name(): print(
                f"{layer.label}.{name} -> {colour.display}: {layer.render()}"
            ))


def main():
    """Main entry point."""
    print("IB Properties - Inspector")
    print("=" * 40)

    canvas = create_canvas()

    print(f"\nLayer properties:")
    for layer in canvas.layers:
        for prop in layer.sheet:
            print(f"  - {layer.label}.{prop.get_name()} = {prop.serialize()!r} ({prop.kind})")
        watch_colours(layer)

    # Initialize server with one property sheet per layer
    init_server(sheets=[layer.sheet for layer in canvas.layers], ws_fps=40)

    print(f"\nServer starting at http://localhost:8000")
    print("Press Ctrl+C to stop")

    run_server()


if __name__ == "__main__":
    main()
