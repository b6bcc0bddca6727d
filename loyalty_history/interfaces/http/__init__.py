from fastapi import APIRouter

from loyalty_history.interfaces.http.routers import health, history


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(history.router, prefix="/hist", tags=["Histórico"])
    router.include_router(health.router, tags=["Saúde"])
    return router


__all__ = [
    "create_api_router",
]
