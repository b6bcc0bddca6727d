from fastapi import APIRouter

from loyalty_history import __version__
from loyalty_history.core.config import get_settings
from loyalty_history.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse, summary="Verifica se o serviço está ativo")
async def health() -> HealthResponse:
    return HealthResponse(status="healthy", service=get_settings().project_name, version=__version__)
