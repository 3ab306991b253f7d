"""
Property inspector server - main FastAPI application.

This module provides the main FastAPI application and server initialization.
"""

from typing import List

from fastapi import FastAPI, WebSocket

from ..core.colours import COLOURS
from ..core.registry import clear_sheet_registry, register_sheet
from ..core.sheet import PropertySheet
from .state import detach_forwarder, state
from .lifecycle import lifespan
from .websocket import queue_change, websocket_endpoint
from .routes.sheets import router as sheets_router


# Create FastAPI application
app = FastAPI(title="IB Property Inspector", lifespan=lifespan)

# Include routers
app.include_router(sheets_router)


# ─────────────────────────────────────────────────────────────────────────────
# Config Endpoints
# ─────────────────────────────────────────────────────────────────────────────

@app.get("/api/config")
async def get_config():
    """Get full application configuration."""
    return {
        "sheets": [sheet.get_schema() for sheet in state.sheets],
        "palette": [colour.to_spec() for colour in COLOURS],
    }


@app.get("/api/palette")
async def get_palette():
    """Get the fixed colour palette."""
    return [colour.to_spec() for colour in COLOURS]


# ─────────────────────────────────────────────────────────────────────────────
# WebSocket Endpoint
# ─────────────────────────────────────────────────────────────────────────────

@app.websocket("/ws")
async def ws_endpoint(websocket: WebSocket):
    """WebSocket endpoint for change notifications."""
    await websocket_endpoint(websocket)


# ─────────────────────────────────────────────────────────────────────────────
# Server Initialization
# ─────────────────────────────────────────────────────────────────────────────

def add_sheet(sheet: PropertySheet) -> str:
    """Register a sheet and forward its change notifications to clients."""
    sheet_id = register_sheet(sheet)
    state.forwarders[sheet_id] = sheet.on(
        "change", lambda name, value: queue_change(sheet_id, name, value)
    )
    state.sheets.append(sheet)
    print(f"Registered sheet: {sheet_id}")
    return sheet_id


def init_server(sheets: List[PropertySheet], ws_fps: float = 60.0):
    """
    Initialize the server with property sheets.

    Args:
        sheets: PropertySheet instances to register at startup
        ws_fps: WebSocket broadcast frequency
    """
    for sheet in state.sheets:
        detach_forwarder(sheet)
    clear_sheet_registry()
    state.sheets = []
    state.forwarders = {}
    state.pending_changes = []
    state.ws_fps = float(ws_fps)

    for sheet in sheets:
        add_sheet(sheet)


def run_server(host: str = "0.0.0.0", port: int = 8000):
    """Run the FastAPI server."""
    import uvicorn
    uvicorn.run(app, host=host, port=port)
