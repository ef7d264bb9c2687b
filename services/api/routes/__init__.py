from .tailor import router as tailor_router, get_tailor_handler
from .health import router as health_router

__all__ = ["tailor_router", "health_router", "get_tailor_handler"]
