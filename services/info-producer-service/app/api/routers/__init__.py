from .callback_routes import router as callback_router
from .health_routes import router as health_router

__all__ = ["callback_router", "health_router"]
