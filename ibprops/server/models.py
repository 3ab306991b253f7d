"""
Pydantic request models for the inspector API.
"""

from typing import Any
from pydantic import BaseModel


class PropertyUpdate(BaseModel):
    """Request body for programmatically setting a property value."""
    value: Any


class ControlInput(BaseModel):
    """Request body for delivering a user edit to a property's control."""
    value: Any
    event: str = "change"
