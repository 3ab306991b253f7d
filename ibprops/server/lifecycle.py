"""
Background loop and application lifecycle for the inspector server.
"""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .state import state
from .websocket import flush_changes


async def broadcast_loop():
    """Background loop pushing queued change notifications."""
    while True:
        try:
            await flush_changes()
        except Exception as e:
            print(f"Broadcast error: {e}")
        await asyncio.sleep(1.0 / state.ws_fps if state.ws_fps > 0 else 0.1)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager."""
    # Startup
    if state.broadcast_task is None:
        state.broadcast_task = asyncio.create_task(broadcast_loop())

    yield

    # Shutdown
    if state.broadcast_task:
        state.broadcast_task.cancel()
        try:
            await state.broadcast_task
        except asyncio.CancelledError:
            pass
        state.broadcast_task = None
