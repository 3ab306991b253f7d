from typing import Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .sheet import PropertySheet

_sheet_registry: Dict[str, "PropertySheet"] = {}
# Monotonic counter to ensure globally unique sheet IDs within a server run
_sheet_counter: int = 0


def register_sheet(sheet: "PropertySheet") -> str:
    """Register a sheet and return its ID."""
    global _sheet_counter
    sheet_id = f"{sheet.label}_{_sheet_counter}"
    _sheet_counter += 1
    sheet.sheet_id = sheet_id
    _sheet_registry[sheet_id] = sheet
    return sheet_id


def unregister_sheet(sheet_id: str):
    """Unregister a sheet by ID."""
    if sheet_id in _sheet_registry:
        del _sheet_registry[sheet_id]


def get_sheet(sheet_id: str) -> Optional["PropertySheet"]:
    """Get a sheet by ID."""
    return _sheet_registry.get(sheet_id)


def get_all_sheets() -> Dict[str, "PropertySheet"]:
    """Get all registered sheets."""
    return _sheet_registry.copy()


def clear_sheet_registry():
    """Clear the sheet registry (for testing)."""
    global _sheet_registry, _sheet_counter
    _sheet_registry = {}
    _sheet_counter = 0
