# studynotes/domain/study/schemas.py
from typing import List

from pydantic import Field, field_validator

from studynotes.domain.base import CamelModel

QUIZ_OPTIONS = 4


class Flashcard(CamelModel):
    question: str
    answer: str


class QuizQuestion(CamelModel):
    question: str
    options: List[str] = Field(min_length=QUIZ_OPTIONS, max_length=QUIZ_OPTIONS)
    correct_answer: int = Field(ge=0, lt=QUIZ_OPTIONS)
    explanation: str

    @field_validator("correct_answer", mode="before")
    @classmethod
    def _no_bool(cls, v):
        # bool es subclase de int; un true/false no es un índice
        if isinstance(v, bool):
            raise ValueError("correctAnswer must be an integer index")
        return v


class StudyMaterials(CamelModel):
    summary: str
    flashcards: List[Flashcard]
    quiz: List[QuizQuestion]
