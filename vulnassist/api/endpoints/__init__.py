from .health import router as health_router
from .risk import router as risk_router
from .suggestions import router as suggestions_router

__all__ = ["health_router", "risk_router", "suggestions_router"]
