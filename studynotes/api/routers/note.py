"""
Endpoints CRUD y búsqueda de notas.
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from studynotes.api.deps import get_note_repo
from studynotes.api.schemas.note import NoteCreate, NoteOut, NoteUpdate
from studynotes.repositories.note_repo import NoteRepository
from studynotes.services import note_service


router = APIRouter(prefix="/notes", tags=["Notes"])


@router.get("", response_model=List[NoteOut], summary="Listar notas")
def list_notes(repo: NoteRepository = Depends(get_note_repo)):
    return note_service.list_notes(repo)


# Declarado antes de /{note_id}; `path` admite "/" (p. ej. %2F) dentro de la consulta
@router.get(
    "/search/{query:path}",
    response_model=List[NoteOut],
    summary="Buscar notas",
    description="Substring sin distinguir mayúsculas en título, contenido y tags.",
)
def search_notes(query: str, repo: NoteRepository = Depends(get_note_repo)):
    return note_service.search_notes(repo, query)


@router.get("/{note_id}", response_model=NoteOut, summary="Obtener nota")
def get_note(note_id: str, repo: NoteRepository = Depends(get_note_repo)):
    return note_service.get_note(repo, note_id)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=NoteOut, summary="Crear nota")
def create_note(payload: NoteCreate, repo: NoteRepository = Depends(get_note_repo)):
    return note_service.insert_note(repo, payload.model_dump())


@router.put("/{note_id}", response_model=NoteOut, summary="Actualizar nota (parcial)")
def update_note(note_id: str, payload: NoteUpdate, repo: NoteRepository = Depends(get_note_repo)):
    return note_service.update_note(repo, note_id, payload.model_dump(exclude_unset=True))


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Eliminar nota")
def delete_note(note_id: str, repo: NoteRepository = Depends(get_note_repo)) -> Response:
    note_service.delete_note(repo, note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
