"""Procesamiento de transcripciones de voz a notas."""
from fastapi import APIRouter, Depends, status

from studynotes.api.deps import get_ai, get_note_repo
from studynotes.api.schemas.voice import VoiceProcessIn, VoiceProcessOut
from studynotes.infrastructure.ai.ai_service import AIService
from studynotes.repositories.note_repo import NoteRepository
from studynotes.services.voice_service import process_transcription


router = APIRouter(prefix="/voice", tags=["Voice"])


@router.post(
    "/process",
    status_code=status.HTTP_201_CREATED,
    response_model=VoiceProcessOut,
    summary="Transcripción → nota",
    description="Estructura la transcripción con IA si está disponible; si no, guarda la transcripción cruda.",
)
def process_voice(
    payload: VoiceProcessIn,
    ai: AIService = Depends(get_ai),
    repo: NoteRepository = Depends(get_note_repo),
) -> VoiceProcessOut:
    note, key_points = process_transcription(ai, repo, payload.transcription)
    return VoiceProcessOut(note=note, key_points=key_points)
