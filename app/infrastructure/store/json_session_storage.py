from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any

from app.application.ports.session_storage import SessionStoragePort
from app.application.utils.state_codec import quote_state_from_dict, quote_state_to_dict
from app.domain.entities.quote_state import QuoteState


class JsonSessionStorage(SessionStoragePort):
    def __init__(self, path: str = "./data/quote_session.json") -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def load(self) -> QuoteState | None:
        """Load the snapshot; a missing or corrupted file counts as no snapshot."""
        with self._lock:
            if not self._path.exists():
                return None
            try:
                with open(self._path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except (json.JSONDecodeError, IOError) as e:
                self._logger.warning("Ignoring unreadable quote session", extra={"reason": str(e)})
                return None
            if not isinstance(data, dict):
                return None
            return quote_state_from_dict(data.get("state", {}))

    def save(self, state: QuoteState) -> None:
        data: dict[str, Any] = {
            "state": quote_state_to_dict(state),
            "version": 1,
        }
        with self._lock:
            self._write(data)

    def clear(self) -> None:
        with self._lock:
            if self._path.exists():
                self._path.unlink()

    def _write(self, data: dict[str, Any]) -> None:
        """Write atomically through a temp file."""
        temp_path = self._path.with_suffix(".json.tmp")
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            temp_path.replace(self._path)
        except Exception:
            if temp_path.exists():
                temp_path.unlink()
            raise
