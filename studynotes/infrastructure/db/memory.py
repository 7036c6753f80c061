"""Almacenamiento en memoria: contenedor explícito de repos (sin singleton de módulo)."""
from dataclasses import dataclass, field

from studynotes.repositories.note_repo import NoteRepository
from studynotes.repositories.user_repo import UserRepository


@dataclass
class MemoryStorage:
    notes: NoteRepository = field(default_factory=NoteRepository)
    users: UserRepository = field(default_factory=UserRepository)


def init_storage() -> MemoryStorage:
    """Colecciones vacías; no requiere teardown más allá del fin del proceso."""
    return MemoryStorage()
