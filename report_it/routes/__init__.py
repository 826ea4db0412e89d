# report_it/routes/__init__.py
from .agencies import router as agencies_router
from .complaints import router as complaints_router
from .health import router as health_router

__all__ = ["agencies_router", "complaints_router", "health_router"]
