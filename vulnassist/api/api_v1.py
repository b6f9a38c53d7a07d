from fastapi import APIRouter
from vulnassist.api.endpoints import (
    health_router,
    risk_router,
    suggestions_router,
)

router = APIRouter(prefix="/api/v1")

router.include_router(health_router, prefix="/health", tags=["health"])
router.include_router(suggestions_router, prefix="/suggestions", tags=["suggestions"])
router.include_router(risk_router, prefix="/risk", tags=["risk"])
