from __future__ import annotations

import copy
from typing import Any, Dict, MutableMapping, Protocol


class SessionStore(Protocol):
    """Key-value store scoped to one client session."""

    def has(self, key: str) -> bool: ...

    def get(self, key: str) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


class MemorySessionStore:
    """Dict-backed session store, one instance per session."""

    def __init__(self, initial: Dict[str, Any] | None = None):
        self._data: Dict[str, Any] = dict(initial or {})

    def has(self, key: str) -> bool:
        return key in self._data

    def get(self, key: str) -> Any:
        return copy.deepcopy(self._data.get(key))

    def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)


class FlaskSessionStore:
    """Adapter over ``flask.session`` (or any mutable mapping with the same semantics)."""

    def __init__(self, session: MutableMapping[str, Any]):
        self.session = session

    def has(self, key: str) -> bool:
        return key in self.session

    def get(self, key: str) -> Any:
        return self.session.get(key)

    def set(self, key: str, value: Any) -> None:
        # Assignment marks the Flask session as modified.
        self.session[key] = value
