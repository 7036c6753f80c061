"""Schemas para endpoints de health/debug."""
from studynotes.domain.base import CamelModel


class PingOut(CamelModel):
    message: str


class HealthOut(CamelModel):
    ok: bool


class DebugStatusOut(CamelModel):
    app_name: str
    api_prefix: str
    openai_configured: bool
    notes_count: int
