"""Entrada principal de la app FastAPI (configura middlewares, excepciones y routers)."""
import logging
from typing import Optional

from fastapi import FastAPI

from studynotes.api.router import api_router
from studynotes.core.config import Settings, get_settings
from studynotes.core.exceptions import register_exception_handlers
from studynotes.core.logging import setup_logging
from studynotes.core.middleware import add_middlewares
from studynotes.infrastructure.ai.ai_service import AIService
from studynotes.infrastructure.ai.openai_client import build_openai
from studynotes.infrastructure.db.memory import MemoryStorage, init_storage

_log = logging.getLogger("studynotes.startup")


def create_app(
    settings: Optional[Settings] = None,
    storage: Optional[MemoryStorage] = None,
    ai: Optional[AIService] = None,
) -> FastAPI:
    """Construye la app con dependencias explícitas (storage e IA inyectables)."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.app_name)
    app.state.settings = settings
    app.state.storage = storage if storage is not None else init_storage()
    app.state.ai = ai if ai is not None else AIService(
        build_openai(settings),
        model_primary=settings.openai_model_primary,
        model_fallback=settings.openai_model_fallback,
    )
    if not app.state.ai.configured:
        _log.warning("OPENAI_API_KEY no configurada; funciones de IA deshabilitadas")

    add_middlewares(app, settings)
    register_exception_handlers(app)

    # Monta routers bajo el prefijo configurado
    app.include_router(api_router, prefix=settings.api_prefix_normalized)
    return app


app = create_app()
