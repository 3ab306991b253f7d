"""
Property sheet API routes.
"""

from fastapi import APIRouter, HTTPException

from ..state import detach_forwarder, state
from ..models import PropertyUpdate, ControlInput
from ..websocket import broadcast_state, flush_changes
from ...core.properties.base import Property
from ...core.registry import get_sheet, unregister_sheet
from ...core.sheet import PropertySheet


router = APIRouter(prefix="/api/sheets", tags=["sheets"])


def _get_sheet_or_404(sheet_id: str) -> PropertySheet:
    sheet = get_sheet(sheet_id)
    if not sheet:
        raise HTTPException(status_code=404, detail=f"Sheet not found: {sheet_id}")
    return sheet


def _get_property_or_404(sheet: PropertySheet, property_name: str) -> Property:
    try:
        return sheet.get(property_name)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Property not found: {property_name}")


def _property_response(sheet_id: str, prop: Property) -> dict:
    return {
        "status": "ok",
        "sheet_id": sheet_id,
        "property": prop.get_name(),
        "value": prop.serialize(),
        "control": prop.get_node().to_spec(),
    }


@router.get("")
async def list_sheets():
    """List all sheets."""
    return [
        {
            "sheet_id": s.sheet_id,
            "label": s.label,
            "properties": s.names(),
        }
        for s in state.sheets
    ]


@router.get("/{sheet_id}")
async def get_sheet_schema(sheet_id: str):
    """Get a sheet's schema."""
    return _get_sheet_or_404(sheet_id).get_schema()


@router.delete("/{sheet_id}")
async def delete_sheet(sheet_id: str):
    """Delete a sheet."""
    sheet = _get_sheet_or_404(sheet_id)
    detach_forwarder(sheet)
    state.sheets = [s for s in state.sheets if s.sheet_id != sheet_id]
    unregister_sheet(sheet_id)
    await broadcast_state()
    return {"status": "ok", "sheet_id": sheet_id}


@router.put("/{sheet_id}/properties/{property_name}")
async def set_sheet_property(sheet_id: str, property_name: str, body: PropertyUpdate):
    """Set a property value, as application code would."""
    prop = _get_property_or_404(_get_sheet_or_404(sheet_id), property_name)

    try:
        prop.set_value(prop.coerce(body.value))
    except (TypeError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    await flush_changes()
    return _property_response(sheet_id, prop)


@router.post("/{sheet_id}/controls/{property_name}")
async def send_control_input(sheet_id: str, property_name: str, body: ControlInput):
    """Deliver a user edit to a property's control."""
    prop = _get_property_or_404(_get_sheet_or_404(sheet_id), property_name)

    try:
        prop.get_node().user_input(body.value, body.event)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    await flush_changes()
    return _property_response(sheet_id, prop)
