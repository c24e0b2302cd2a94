# API endpoints and routers

from .auth_endpoints import router as auth_router
from .trips_endpoints import router as trips_router
from .memories_endpoints import router as memories_router
from .health_endpoints import router as health_router

__all__ = [
    "auth_router",
    "trips_router",
    "memories_router",
    "health_router",
]
