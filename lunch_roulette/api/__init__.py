# API endpoints and routers

from .restaurant_endpoints import router as restaurant_router
from .health_endpoints import router as health_router

__all__ = [
    "restaurant_router",
    "health_router",
]
