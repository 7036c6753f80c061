"""
Transcripción de voz → nota estructurada.

Política de fallback:
  1) Sin IA configurada: nota directa con la transcripción cruda.
  2) IA configurada pero falla: misma nota cruda (la transcripción nunca se pierde).
  3) IA ok: título/contenido/tags generados.
En todos los casos la nota queda marcada como generada por voz y guarda la
transcripción original.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from studynotes.infrastructure.ai.ai_service import AIService
from studynotes.repositories.note_repo import NoteRepository

_log = logging.getLogger("studynotes.voice")

VOICE_NOTES_TITLE = "Voice Notes"
FALLBACK_TAGS = ("voice",)

TRANSCRIPTION_PROMPT = """Please process the following voice transcription into well-structured lecture/meeting notes. 

Transcription: "{transcription}"

Format the output as JSON with the following structure:
{{
  "title": "A concise, descriptive title for the notes",
  "content": "Clean, well-formatted notes with proper paragraphs, bullet points, and structure",
  "tags": ["relevant", "topic", "tags"],
  "keyPoints": ["key point 1", "key point 2", "key point 3"]
}}

Make the content professional, organized, and easy to study from. Fix any grammar issues, organize ideas logically, and add structure where needed."""


@dataclass
class StructuredTranscript:
    title: str
    content: str
    tags: List[str] = field(default_factory=list)
    key_points: List[str] = field(default_factory=list)


def build_transcription_prompt(transcription: str) -> str:
    return TRANSCRIPTION_PROMPT.format(transcription=transcription)


def _str_list(raw: Any) -> List[str]:
    if not isinstance(raw, list):
        return []
    return [x for x in raw if isinstance(x, str)]


def decode_transcription(data: Dict[str, Any], transcription: str) -> StructuredTranscript:
    title = data.get("title")
    content = data.get("content")
    return StructuredTranscript(
        title=title if isinstance(title, str) and title else VOICE_NOTES_TITLE,
        content=content if isinstance(content, str) and content else transcription,
        tags=_str_list(data.get("tags")),
        key_points=_str_list(data.get("keyPoints")),
    )


def fallback_transcript(transcription: str) -> StructuredTranscript:
    return StructuredTranscript(title=VOICE_NOTES_TITLE, content=transcription, tags=list(FALLBACK_TAGS))


def structure_transcription(ai: AIService, transcription: str) -> StructuredTranscript:
    if not ai.configured:
        return fallback_transcript(transcription)
    try:
        data = ai.complete_json(build_transcription_prompt(transcription))
    except Exception:
        _log.exception("Falló el procesamiento con IA; usando la transcripción cruda")
        return fallback_transcript(transcription)
    return decode_transcription(data, transcription)


def process_transcription(
    ai: AIService, repo: NoteRepository, transcription: str
) -> Tuple[Dict[str, Any], List[str]]:
    """Estructura y persiste la transcripción. Devuelve (nota, key_points)."""
    st = structure_transcription(ai, transcription)
    note = repo.insert_note(
        {
            "title": st.title,
            "content": st.content,
            "tags": st.tags,
            "is_voice_generated": True,
            "original_transcript": transcription,
        }
    )
    return note, st.key_points
