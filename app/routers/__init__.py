"""
Routers FastAPI
"""

from .chat import router as chat_router
from .lead import router as lead_router
from .health import router as health_router

__all__ = [
    "chat_router",
    "lead_router",
    "health_router",
]
