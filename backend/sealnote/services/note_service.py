"""
Note lifecycle: create, read, update and delete gated by the note password.

Every operation except create follows the same path: fetch the record, decode
its content, check the caller's password against the decoded content, and
only then apply the effect. Nothing is written to the store before the
password check passes.
"""
from __future__ import annotations

from dataclasses import dataclass

from sealnote.core.exceptions import AuthError, InternalError, NotFoundError, ValidationError
from sealnote.core.logging import get_logger
from sealnote.storage.notes_store import NotesStore, StoredNote
from sealnote.utils.content_codec import ContentDecodeError, decode_content, encode_content
from sealnote.utils.note_digest import derive_digest, verify_digest

logger = get_logger(__name__)

DEFAULT_NOTE_TYPE = "text"

CREATE_REQUIRED_MESSAGE = "title, content and password are required"
READ_REQUIRED_MESSAGE = "id and password are required"
UPDATE_REQUIRED_MESSAGE = "id, title, content and currentPassword are required"
DELETE_REQUIRED_MESSAGE = "id and password are required"

READ_FORBIDDEN_MESSAGE = "wrong password, cannot access note"
UPDATE_FORBIDDEN_MESSAGE = "current password is wrong, cannot update note"
DELETE_FORBIDDEN_MESSAGE = "wrong password, cannot delete note"

CREATE_FAILED_MESSAGE = "failed to create note, please try again later"

# store faults surfaced to callers as "not found"
_STORE_FAULTS = (OSError, KeyError, TypeError, ValueError)


@dataclass(frozen=True)
class NoteView:
    """A note as returned to a caller who presented the right password."""

    id: str
    title: str
    content: str
    type: str
    views: int
    created_at: str


def _require(message: str, *values: object) -> None:
    for value in values:
        if not isinstance(value, str) or not value:
            raise ValidationError(message)


def _note_type(value: str | None) -> str:
    return value or DEFAULT_NOTE_TYPE


class NoteService:
    def __init__(self, store: NotesStore):
        self.store = store

    def _fetch(self, note_id: str, action: str) -> StoredNote:
        try:
            note = self.store.fetch(note_id)
        except _STORE_FAULTS as exc:
            logger.error("Note fetch failed", action=action, note_id=note_id, error=repr(exc))
            raise NotFoundError() from exc
        if note is None:
            logger.info("Note not found", action=action, note_id=note_id)
            raise NotFoundError()
        return note

    def _unlock(self, note: StoredNote, password: str, action: str, forbidden_message: str) -> str:
        """Decode the stored content and check the password against it."""
        try:
            content = decode_content(note.content)
        except ContentDecodeError as exc:
            logger.error("Stored content could not be decoded", action=action, note_id=note.id, error=str(exc))
            raise NotFoundError() from exc

        if not verify_digest(password, content, note.password_hash):
            logger.warning("Password mismatch", action=action, note_id=note.id)
            raise AuthError(forbidden_message)
        return content

    def create(self, title: str, content: str, password: str, note_type: str | None = None) -> str:
        """Store a new note and return its id."""
        _require(CREATE_REQUIRED_MESSAGE, title, content, password)

        try:
            note = self.store.create(
                title=title,
                content=encode_content(content),
                password_hash=derive_digest(password, content),
                note_type=_note_type(note_type),
            )
        except OSError as exc:
            logger.exception("Note create failed")
            raise InternalError(CREATE_FAILED_MESSAGE) from exc

        logger.info("Note created", note_id=note.id)
        return note.id

    def read(self, note_id: str, password: str) -> NoteView:
        """Return the decoded note and count the view. Views only count on success."""
        _require(READ_REQUIRED_MESSAGE, note_id, password)

        note = self._fetch(note_id, "read")
        content = self._unlock(note, password, "read", READ_FORBIDDEN_MESSAGE)

        try:
            counted = self.store.increment(note.id, "views", 1)
        except _STORE_FAULTS as exc:
            logger.error("View increment failed", note_id=note.id, error=repr(exc))
            raise NotFoundError() from exc
        if counted is None:
            # deleted between fetch and increment
            raise NotFoundError()

        logger.info("Note read", note_id=note.id, views=counted.views)
        # metadata from the record the password was checked against; only views is newer
        return NoteView(
            id=note.id,
            title=note.title,
            content=content,
            type=note.type,
            views=counted.views,
            created_at=note.created_at,
        )

    def update(
        self,
        note_id: str,
        title: str,
        content: str,
        current_password: str,
        note_type: str | None = None,
        new_password: str | None = None,
    ) -> str:
        """Replace title, type and content; re-derive the digest.

        Without `new_password` the current password stays valid for the new
        content.
        """
        _require(UPDATE_REQUIRED_MESSAGE, note_id, title, content, current_password)

        note = self._fetch(note_id, "update")
        self._unlock(note, current_password, "update", UPDATE_FORBIDDEN_MESSAGE)

        password = new_password or current_password
        try:
            updated = self.store.replace(
                note.id,
                title=title,
                content=encode_content(content),
                password_hash=derive_digest(password, content),
                note_type=_note_type(note_type),
            )
        except _STORE_FAULTS as exc:
            logger.error("Note replace failed", note_id=note.id, error=repr(exc))
            raise NotFoundError() from exc
        if updated is None:
            raise NotFoundError()

        logger.info("Note updated", note_id=note.id, password_changed=bool(new_password))
        return updated.id

    def delete(self, note_id: str, password: str) -> None:
        _require(DELETE_REQUIRED_MESSAGE, note_id, password)

        note = self._fetch(note_id, "delete")
        self._unlock(note, password, "delete", DELETE_FORBIDDEN_MESSAGE)

        try:
            deleted = self.store.delete(note.id)
        except OSError as exc:
            logger.error("Note delete failed", note_id=note.id, error=repr(exc))
            raise NotFoundError() from exc
        if not deleted:
            raise NotFoundError()

        logger.info("Note deleted", note_id=note.id)
