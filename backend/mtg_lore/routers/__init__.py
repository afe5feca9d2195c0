"""
API Routers / API 路由
"""

from .health import router as health_router
from .lore import router as lore_router

__all__ = [
    "health_router",
    "lore_router",
]
