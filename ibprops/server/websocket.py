"""
WebSocket handling for the inspector server.
"""

import json
from typing import Any, Dict

from fastapi import WebSocket, WebSocketDisconnect

from ..core.colours import Colour
from .state import state


class PropertyEncoder(json.JSONEncoder):
    """JSON encoder that sends colour tokens by machine name."""

    def default(self, obj):
        if isinstance(obj, Colour):
            return obj.name
        return super().default(obj)


def build_sheets_state() -> Dict[str, Any]:
    """Current values of every registered sheet."""
    return {sheet.sheet_id: sheet.values() for sheet in state.sheets}


def queue_change(sheet_id: str, name: str, value: Any):
    """Record a property change for the next flush. Nothing is kept without clients."""
    if not state.websocket_clients:
        return
    state.pending_changes.append({
        "type": "change",
        "sheet_id": sheet_id,
        "property": name,
        "value": value,
    })


async def _send_to_all(msg: str):
    for client in list(state.websocket_clients):
        try:
            await client.send_text(msg)
        except Exception:
            state.websocket_clients.discard(client)


async def send_state_to_client(websocket: WebSocket):
    """Send current state to a single WebSocket client."""
    data = {"type": "state", "sheets": build_sheets_state()}
    await websocket.send_text(json.dumps(data, cls=PropertyEncoder))


async def flush_changes():
    """Push queued change notifications to all connected clients, in order."""
    changes, state.pending_changes = state.pending_changes, []
    if not state.websocket_clients:
        return
    for change in changes:
        await _send_to_all(json.dumps(change, cls=PropertyEncoder))


async def broadcast_state():
    """Broadcast current state to all connected WebSocket clients."""
    if not state.websocket_clients:
        return
    data = {"type": "state", "sheets": build_sheets_state()}
    await _send_to_all(json.dumps(data, cls=PropertyEncoder))


async def websocket_endpoint(websocket: WebSocket):
    """Handle WebSocket connection lifecycle."""
    await websocket.accept()
    state.websocket_clients.add(websocket)
    try:
        await send_state_to_client(websocket)
        while True:
            data = await websocket.receive_text()
            try:
                message = json.loads(data)
            except ValueError:
                continue
            if isinstance(message, dict) and message.get("type") == "ping":
                await websocket.send_json({"type": "pong"})
    except WebSocketDisconnect:
        state.websocket_clients.discard(websocket)
