"""
Inspector server routes.
"""

from .sheets import router as sheets_router

__all__ = ["sheets_router"]
