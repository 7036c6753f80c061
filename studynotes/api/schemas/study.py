"""Schemas HTTP de material de estudio; los modelos de salida viven en el dominio."""
from pydantic import Field, StrictStr

from studynotes.domain.base import CamelModel
from studynotes.domain.study.schemas import Flashcard, QuizQuestion, StudyMaterials

__all__ = ["StudyGenerateIn", "Flashcard", "QuizQuestion", "StudyMaterials"]


class StudyGenerateIn(CamelModel):
    note_content: StrictStr = Field(min_length=1)
