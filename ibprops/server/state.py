"""
Global state management for the property inspector server.
"""

import asyncio
from typing import Any, Callable, Dict, List, Optional

from ..core.sheet import PropertySheet


class ServerState:
    """Container for all server global state."""

    # Sheet instances, in registration order
    sheets: List[PropertySheet] = []

    # WebSocket clients
    websocket_clients: set = set()

    # Background tasks
    broadcast_task: Optional[asyncio.Task] = None

    # WebSocket settings
    ws_fps: float = 60.0

    # Change notifications waiting to be pushed to clients
    pending_changes: List[Dict[str, Any]] = []

    # sheet_id -> listener forwarding that sheet's changes to clients
    forwarders: Dict[str, Callable] = {}


# Global state instance
state = ServerState()


def get_sheets() -> List[PropertySheet]:
    """Get all sheet instances."""
    return state.sheets


def get_websocket_clients() -> set:
    """Get connected WebSocket clients."""
    return state.websocket_clients


def detach_forwarder(sheet: PropertySheet):
    """Stop forwarding a sheet's changes to clients."""
    callback = state.forwarders.pop(sheet.sheet_id, None)
    if callback is not None:
        sheet.off("change", callback)


def get_ws_fps() -> float:
    """Get WebSocket broadcast FPS."""
    return state.ws_fps
