"""Construcción del cliente de OpenAI a partir de settings."""
from typing import Optional

from openai import OpenAI

from studynotes.core.config import Settings


def build_openai(settings: Settings) -> Optional[OpenAI]:
    """
    Devuelve un cliente de OpenAI si hay API key en settings; None si no.
    Sin reintentos: un timeout se reporta como fallo de generación.
    """
    if not settings.openai_api_key:
        return None
    return OpenAI(
        api_key=settings.openai_api_key,
        timeout=settings.openai_timeout_seconds,
        max_retries=0,
    )
