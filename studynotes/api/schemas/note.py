"""
Esquemas Pydantic para notas. JSON en camelCase; también se acepta snake_case.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from studynotes.domain.base import CamelModel


class NoteCreate(CamelModel):
    title: str = Field(min_length=1)
    content: str
    # null equivale a omitir el campo; el repo aplica los defaults
    tags: Optional[List[str]] = Field(default_factory=list)
    is_voice_generated: Optional[bool] = False
    original_transcript: Optional[str] = None


class NoteUpdate(CamelModel):
    """
    Esquema para actualización parcial.
    Solo se aplican los campos enviados (`exclude_unset`); null solo es válido
    para `originalTranscript`.
    """
    title: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = None
    tags: Optional[List[str]] = None
    is_voice_generated: Optional[bool] = None
    original_transcript: Optional[str] = None

    @field_validator("title", "content", "tags", "is_voice_generated")
    @classmethod
    def _not_null(cls, v):
        if v is None:
            raise ValueError("field cannot be null")
        return v


class NoteOut(CamelModel):
    id: str
    title: str
    content: str
    tags: List[str]
    is_voice_generated: bool
    original_transcript: Optional[str] = None
    created_at: datetime
    updated_at: datetime
