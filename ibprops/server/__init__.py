"""
Inspector Server Package.

Provides FastAPI-based HTTP and WebSocket access to property sheets.
"""

from .server import app, add_sheet, init_server, run_server
from .state import state, get_sheets, get_websocket_clients
from .models import PropertyUpdate, ControlInput
from .websocket import PropertyEncoder, broadcast_state, flush_changes, websocket_endpoint

__all__ = [
    # Server
    "app",
    "add_sheet",
    "init_server",
    "run_server",
    # State
    "state",
    "get_sheets",
    "get_websocket_clients",
    # Models
    "PropertyUpdate",
    "ControlInput",
    # WebSocket
    "PropertyEncoder",
    "broadcast_state",
    "flush_changes",
    "websocket_endpoint",
]
