"""
Service layer for notes: thin wrappers over the repository that turn
"not found" into `NotFoundError`.
"""
from typing import Any, Dict, List

from studynotes.core.exceptions import NotFoundError
from studynotes.repositories.note_repo import NoteRepository

NOTE_NOT_FOUND = "Note not found"


def list_notes(repo: NoteRepository) -> List[Dict[str, Any]]:
    return repo.list_notes()


def get_note(repo: NoteRepository, note_id: str) -> Dict[str, Any]:
    note = repo.get_note(note_id)
    if note is None:
        raise NotFoundError(NOTE_NOT_FOUND)
    return note


def insert_note(repo: NoteRepository, doc: Dict[str, Any]) -> Dict[str, Any]:
    return repo.insert_note(doc)


def update_note(repo: NoteRepository, note_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
    note = repo.update_note(note_id, changes)
    if note is None:
        raise NotFoundError(NOTE_NOT_FOUND)
    return note


def delete_note(repo: NoteRepository, note_id: str) -> None:
    if not repo.delete_note(note_id):
        raise NotFoundError(NOTE_NOT_FOUND)


def search_notes(repo: NoteRepository, query: str) -> List[Dict[str, Any]]:
    return repo.search_notes(query)
