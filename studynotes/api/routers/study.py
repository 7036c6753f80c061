"""Generación de material de estudio con IA."""
from fastapi import APIRouter, Depends

from studynotes.api.deps import get_ai
from studynotes.api.schemas.study import StudyGenerateIn, StudyMaterials
from studynotes.infrastructure.ai.ai_service import AIService
from studynotes.services.study_service import generate_study_materials


router = APIRouter(prefix="/study", tags=["Study"])


@router.post(
    "/generate",
    response_model=StudyMaterials,
    summary="Resumen, flashcards y quiz",
    description="503 si la IA no está configurada; 500 si la generación falla.",
)
def generate(payload: StudyGenerateIn, ai: AIService = Depends(get_ai)) -> StudyMaterials:
    return generate_study_materials(ai, payload.note_content)
