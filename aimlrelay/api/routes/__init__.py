"""
API Routes module.

Contains all API endpoint routers.
"""

from aimlrelay.api.routes import answer, health

__all__ = ["answer", "health"]
