"""Agregador de routers de la API."""
from fastapi import APIRouter
from studynotes.api.routers import health, note, study, voice

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(note.router)
api_router.include_router(voice.router)
api_router.include_router(study.router)
