"""Schemas para el procesamiento de transcripciones de voz."""
from typing import List

from pydantic import Field, StrictStr

from studynotes.api.schemas.note import NoteOut
from studynotes.domain.base import CamelModel


class VoiceProcessIn(CamelModel):
    transcription: StrictStr = Field(min_length=1)


class VoiceProcessOut(CamelModel):
    note: NoteOut
    key_points: List[str]
