"""
Generación de material de estudio (resumen, flashcards y quiz) a partir del
contenido de una nota.

La respuesta del modelo se decodifica campo por campo: un JSON incompleto o
mal formado nunca rompe al caller, solo produce valores por defecto.
"""
import logging
from typing import Any, Dict, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from studynotes.domain.study.schemas import Flashcard, QuizQuestion, StudyMaterials
from studynotes.core.exceptions import GenerationError
from studynotes.infrastructure.ai.ai_service import AIService

_log = logging.getLogger("studynotes.study")

NO_SUMMARY = "No summary available"
STUDY_FAILED = "Failed to generate study materials"

STUDY_PROMPT = """Based on the following notes, generate study materials:

Notes: "{content}"

Create comprehensive study materials in JSON format:
{{
  "summary": "A concise summary highlighting the main concepts and key takeaways",
  "flashcards": [
    {{"question": "Question about key concept", "answer": "Clear, concise answer"}},
    ...
  ],
  "quiz": [
    {{
      "question": "Multiple choice question",
      "options": ["Option A", "Option B", "Option C", "Option D"],
      "correctAnswer": 1,
      "explanation": "Why this answer is correct"
    }},
    ...
  ]
}}

Generate 4-6 flashcards and 4-5 quiz questions. Make them educational and focused on the key concepts."""

M = TypeVar("M", bound=BaseModel)


def build_study_prompt(content: str) -> str:
    return STUDY_PROMPT.format(content=content)


def _decode_items(raw: Any, model: Type[M], field: str) -> List[M]:
    """Lista de items válidos; lo que no es lista da [] y los items inválidos se descartan."""
    if not isinstance(raw, list):
        return []
    out: List[M] = []
    for i, item in enumerate(raw):
        try:
            out.append(model.model_validate(item))
        except ValidationError as e:
            _log.warning("Descartando %s[%d] inválido: %s", field, i, e.errors(include_url=False))
    return out


def decode_study_materials(data: Dict[str, Any]) -> StudyMaterials:
    summary = data.get("summary")
    if not isinstance(summary, str) or not summary:
        summary = NO_SUMMARY
    return StudyMaterials(
        summary=summary,
        flashcards=_decode_items(data.get("flashcards"), Flashcard, "flashcards"),
        quiz=_decode_items(data.get("quiz"), QuizQuestion, "quiz"),
    )


def generate_study_materials(ai: AIService, note_content: str) -> StudyMaterials:
    """AIUnavailableError sin API key; GenerationError si la llamada falla. Sin fallback local."""
    try:
        data = ai.complete_json(build_study_prompt(note_content))
    except GenerationError as e:
        raise GenerationError(STUDY_FAILED) from e
    return decode_study_materials(data)
