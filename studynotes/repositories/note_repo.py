"""Repo de notas en memoria (vive lo que dura el proceso).

Los registros son dicts con claves snake_case; toda lectura devuelve copias
para que el caller no pueda alterar el estado interno.
"""
import copy
import threading
from typing import Any, Dict, List, Optional
from uuid import uuid4

from studynotes.core.time import next_after, now_utc

# Campos que un update puede tocar; id/created_at/updated_at se ignoran
MUTABLE_FIELDS = ("title", "content", "tags", "is_voice_generated", "original_transcript")


def _by_recent(items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return sorted(items, key=lambda n: n["updated_at"], reverse=True)


class NoteRepository:
    def __init__(self) -> None:
        self._notes: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def count(self) -> int:
        return len(self._notes)

    def list_notes(self) -> List[Dict[str, Any]]:
        """Todas las notas, ordenadas por updated_at desc."""
        with self._lock:
            items = [copy.deepcopy(n) for n in self._notes.values()]
        return _by_recent(items)

    def get_note(self, note_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            note = self._notes.get(note_id)
            return copy.deepcopy(note) if note is not None else None

    def insert_note(self, doc: Dict[str, Any]) -> Dict[str, Any]:
        """Inserta nota con defaults y devuelve el registro completo.

        `doc` debe traer `title` y `content`; el resto es opcional.
        """
        now = now_utc()
        note = {
            "id": str(uuid4()),
            "title": doc["title"],
            "content": doc["content"],
            "tags": list(doc.get("tags") or []),
            "is_voice_generated": bool(doc.get("is_voice_generated", False)),
            "original_transcript": doc.get("original_transcript"),
            "created_at": now,
            "updated_at": now,
        }
        with self._lock:
            self._notes[note["id"]] = note
            return copy.deepcopy(note)

    def update_note(self, note_id: str, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Mezcla `changes` sobre la nota existente; None si no existe."""
        with self._lock:
            current = self._notes.get(note_id)
            if current is None:
                return None
            updated = dict(current)
            for key in MUTABLE_FIELDS:
                if key in changes:
                    updated[key] = copy.deepcopy(changes[key])
            updated["updated_at"] = next_after(current["updated_at"])
            self._notes[note_id] = updated
            return copy.deepcopy(updated)

    def delete_note(self, note_id: str) -> bool:
        with self._lock:
            return self._notes.pop(note_id, None) is not None

    def search_notes(self, query: str) -> List[Dict[str, Any]]:
        """Búsqueda por substring sin distinguir mayúsculas en título, contenido y tags.

        Una consulta vacía coincide con todas las notas.
        """
        q = query.lower()

        def _matches(n: Dict[str, Any]) -> bool:
            return (
                q in n["title"].lower()
                or q in n["content"].lower()
                or any(q in t.lower() for t in n["tags"])
            )

        with self._lock:
            items = [copy.deepcopy(n) for n in self._notes.values() if _matches(n)]
        return _by_recent(items)
