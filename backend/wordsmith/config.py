from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional


BACKEND_DIR = Path(__file__).resolve().parent.parent
DEFAULT_EXPORT_DIR = (BACKEND_DIR / "data" / "exports").resolve()


@dataclass(frozen=True)
class Settings:
    app_title: str = "Wordsmith API"
    app_version: str = "0.1.0"
    api_key: Optional[str] = None
    model: str = "gemini-2.5-flash"
    log_level: str = "INFO"
    export_dir: Path = DEFAULT_EXPORT_DIR
    english_level: str = "intermediate"


def _resolve_export_dir() -> Path:
    env_value = os.getenv("WORDSMITH_EXPORT_DIR")
    if not env_value:
        return DEFAULT_EXPORT_DIR
    candidate = Path(env_value).expanduser()
    if not candidate.is_absolute():
        candidate = BACKEND_DIR / candidate
    return candidate.resolve()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        api_key=os.getenv("WORDSMITH_API_KEY") or os.getenv("GEMINI_API_KEY"),
        model=os.getenv("WORDSMITH_MODEL", "gemini-2.5-flash"),
        log_level=os.getenv("WORDSMITH_LOG_LEVEL", "INFO").upper(),
        export_dir=_resolve_export_dir(),
        english_level=os.getenv("WORDSMITH_ENGLISH_LEVEL", "intermediate"),
    )
