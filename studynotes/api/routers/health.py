"""Health y debug (sin auth), salidas tipadas y estables."""
from fastapi import APIRouter, Depends, status

from studynotes.api.deps import get_ai, get_settings_dep, get_storage
from studynotes.api.schemas.health import DebugStatusOut, HealthOut, PingOut
from studynotes.core.config import Settings
from studynotes.infrastructure.ai.ai_service import AIService
from studynotes.infrastructure.db.memory import MemoryStorage


router = APIRouter(tags=["Health"])  # no prefix to keep paths stable


@router.get("/ping", response_model=PingOut, summary="Ping básico")
def ping() -> PingOut:
    return PingOut(message="pong")


@router.get("/health", status_code=status.HTTP_200_OK, response_model=HealthOut, summary="Salud básica")
def health() -> HealthOut:
    return HealthOut(ok=True)


@router.get("/_debug/status", response_model=DebugStatusOut, summary="Estado de configuración")
def debug_status(
    settings: Settings = Depends(get_settings_dep),
    storage: MemoryStorage = Depends(get_storage),
    ai: AIService = Depends(get_ai),
) -> DebugStatusOut:
    return DebugStatusOut(
        app_name=settings.app_name,
        api_prefix=settings.api_prefix_normalized,
        openai_configured=ai.configured,
        notes_count=storage.notes.count(),
    )
