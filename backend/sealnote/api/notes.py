from fastapi import APIRouter

from sealnote.core.config import get_settings
from sealnote.models.notes import MessageOut, NoteCreate, NoteDelete, NoteGet, NoteIdOut, NoteOut, NoteUpdate
from sealnote.services.note_service import NoteService
from sealnote.storage.notes_store import NotesStore

router = APIRouter(prefix="/api", tags=["notes"])

settings = get_settings()
service = NoteService(NotesStore(settings.data_dir))


@router.post("/create", response_model=NoteIdOut)
def create_note(payload: NoteCreate) -> NoteIdOut:
    note_id = service.create(
        title=payload.title,
        content=payload.content,
        password=payload.password,
        note_type=payload.type,
    )
    return NoteIdOut(id=note_id, message="note created")


@router.post("/get", response_model=NoteOut)
def get_note(payload: NoteGet) -> NoteOut:
    note = service.read(note_id=payload.id, password=payload.password)
    return NoteOut(
        id=note.id,
        title=note.title,
        content=note.content,
        type=note.type,
        views=note.views,
        created_at=note.created_at,
    )


@router.post("/update", response_model=NoteIdOut)
def update_note(payload: NoteUpdate) -> NoteIdOut:
    note_id = service.update(
        note_id=payload.id,
        title=payload.title,
        content=payload.content,
        current_password=payload.current_password,
        note_type=payload.type,
        new_password=payload.new_password,
    )
    return NoteIdOut(id=note_id, message="note updated")


@router.post("/delete", response_model=MessageOut)
def delete_note(payload: NoteDelete) -> MessageOut:
    service.delete(note_id=payload.id, password=payload.password)
    return MessageOut(message="note deleted")
