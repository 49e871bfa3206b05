"""JSON-file-backed implementation of SessionRepository."""

from __future__ import annotations

import json
import os
from pathlib import Path

from crm.domain.repository.session_repository import SessionRepository


class JsonSessionStore(SessionRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- SessionRepository interface ------------------------------------------

    def load_token(self) -> str | None:
        return self._load_raw().get("token") or None

    def save_token(self, token: str) -> None:
        raw = self._load_raw()
        raw["token"] = token
        self._persist_raw(raw)

    def clear(self) -> None:
        self._persist_raw({})

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict:
        try:
            data = json.loads(self._file_path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError:
            return {}
        return data if isinstance(data, dict) else {}

    def _persist_raw(self, raw: dict) -> None:
        # Restrict the file before the token is written into it.
        fd = os.open(self._file_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            self._file_path.chmod(0o600)
            fh.write(json.dumps(raw, indent=2) + "\n")

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._persist_raw({})
