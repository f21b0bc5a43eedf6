import json
import os
import threading
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

COUNTER_FIELDS = ("views",)


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _parse_note_id(note_id: str) -> uuid.UUID | None:
    # ids are opaque to callers; anything that is not a UUID cannot name a record
    try:
        return uuid.UUID(str(note_id))
    except (ValueError, AttributeError, TypeError):
        return None


def _atomic_write_json(path: Path, data: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    with tmp_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
        f.flush()
        os.fsync(f.fileno())
    tmp_path.replace(path)


@dataclass(frozen=True)
class StoredNote:
    """A note record exactly as persisted. `content` is the encoded form."""

    id: str
    title: str
    type: str
    content: str
    password_hash: str
    views: int
    created_at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "type": self.type,
            "content": self.content,
            "password_hash": self.password_hash,
            "views": self.views,
            "created_at": self.created_at,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "StoredNote":
        return cls(
            id=str(raw["id"]),
            title=raw["title"],
            type=raw["type"],
            content=raw["content"],
            password_hash=raw["password_hash"],
            views=int(raw["views"]),
            created_at=raw["created_at"],
        )


class NotesStore:
    """One JSON document per note under <base_dir>/notes/<id>.json.

    Read-modify-write operations are serialized by an in-process lock, so
    `increment` is atomic for every caller sharing this store instance.
    """

    def __init__(self, base_dir: Path):
        self.base_dir = base_dir
        self._lock = threading.Lock()

    def _note_path(self, note_id: uuid.UUID) -> Path:
        return self.base_dir / "notes" / f"{note_id}.json"

    def _read(self, path: Path) -> StoredNote | None:
        if not path.exists():
            return None
        raw = json.loads(path.read_text(encoding="utf-8"))
        return StoredNote.from_dict(raw)

    def create(self, title: str, content: str, password_hash: str, note_type: str, views: int = 0) -> StoredNote:
        note = StoredNote(
            id=str(uuid.uuid4()),
            title=title,
            type=note_type,
            content=content,
            password_hash=password_hash,
            views=views,
            created_at=_utc_now_iso(),
        )
        _atomic_write_json(self._note_path(uuid.UUID(note.id)), note.to_dict())
        return note

    def fetch(self, note_id: str) -> StoredNote | None:
        nid = _parse_note_id(note_id)
        if nid is None:
            return None
        return self._read(self._note_path(nid))

    def increment(self, note_id: str, field: str, delta: int = 1) -> StoredNote | None:
        if field not in COUNTER_FIELDS:
            raise ValueError(f"Field is not a counter: {field}")
        nid = _parse_note_id(note_id)
        if nid is None:
            return None

        path = self._note_path(nid)
        with self._lock:
            if not path.exists():
                return None
            raw = json.loads(path.read_text(encoding="utf-8"))
            raw[field] = int(raw.get(field, 0)) + delta
            _atomic_write_json(path, raw)
        return StoredNote.from_dict(raw)

    def replace(self, note_id: str, title: str, content: str, password_hash: str, note_type: str) -> StoredNote | None:
        """Replace the mutable fields in one write; id, created_at and views are kept."""
        nid = _parse_note_id(note_id)
        if nid is None:
            return None

        path = self._note_path(nid)
        with self._lock:
            if not path.exists():
                return None
            raw = json.loads(path.read_text(encoding="utf-8"))
            raw["title"] = title
            raw["content"] = content
            raw["password_hash"] = password_hash
            raw["type"] = note_type
            _atomic_write_json(path, raw)
        return StoredNote.from_dict(raw)

    def delete(self, note_id: str) -> bool:
        nid = _parse_note_id(note_id)
        if nid is None:
            return False

        path = self._note_path(nid)
        with self._lock:
            try:
                path.unlink()
            except FileNotFoundError:
                return False
        return True
