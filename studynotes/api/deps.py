"""
Dependencias reutilizables para routers (FastAPI Depends).

Los objetos viven en `app.state` (construidos en `create_app`), así cada
app/test tiene su propio storage aislado.
"""
from fastapi import Request

from studynotes.core.config import Settings
from studynotes.infrastructure.ai.ai_service import AIService
from studynotes.infrastructure.db.memory import MemoryStorage
from studynotes.repositories.note_repo import NoteRepository


def get_settings_dep(request: Request) -> Settings:
    return request.app.state.settings


def get_storage(request: Request) -> MemoryStorage:
    return request.app.state.storage


def get_note_repo(request: Request) -> NoteRepository:
    return request.app.state.storage.notes


def get_ai(request: Request) -> AIService:
    return request.app.state.ai
