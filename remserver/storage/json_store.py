from pathlib import Path
import json
import logging
import os
from typing import Any, Dict

log = logging.getLogger(__name__)


class JsonSessionStore:
    """Server-side session data: one JSON file per session id."""

    def __init__(self, data_dir: Path, session_id: str):
        if not session_id or not session_id.isalnum():
            raise ValueError("session_id must be a non-empty alphanumeric string")
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.session_id = session_id

    def _path(self) -> Path:
        return self.data_dir / f"{self.session_id}.json"

    def _load(self) -> Dict[str, Any]:
        p = self._path()
        if not p.exists():
            return {}
        with p.open("r", encoding="utf-8") as f:
            return json.load(f)

    def _save(self, obj: Dict[str, Any]):
        p = self._path()
        tmp = p.with_name(f"{p.name}.tmp")
        try:
            with tmp.open("w", encoding="utf-8") as f:
                json.dump(obj, f, indent=2, ensure_ascii=False)
            # The session file is only ever swapped whole.
            os.replace(tmp, p)
        finally:
            tmp.unlink(missing_ok=True)
        log.debug("Wrote session file %s", p)

    def has(self, key: str) -> bool:
        return key in self._load()

    def get(self, key: str):
        return self._load().get(key)

    def set(self, key: str, value: Any):
        data = self._load()
        data[key] = value
        self._save(data)
