from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# repository_root/data (we are in backend/sealnote/core)
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    log_level: str
    log_format: str
    cors_origins: list[str]


def _cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


def _log_format() -> str:
    fmt = os.getenv("LOG_FORMAT", "console").strip().lower()
    if fmt not in ("json", "console"):
        return "console"
    return fmt


def get_settings() -> Settings:
    """Read settings from the environment. Called once per app instance."""
    return Settings(
        data_dir=Path(os.getenv("APP_DATA_DIR", str(DEFAULT_DATA_DIR))),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_format=_log_format(),
        cors_origins=_cors_origins(),
    )
