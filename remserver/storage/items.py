from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from ..exceptions import MalformedInput


def is_item_id(value: Any) -> bool:
    """Ids are numbers. bool is an int subclass but never a valid id."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def same_id(a: Any, b: Any) -> bool:
    """Strict id comparison: both type and value must match, so 3 != "3" and 3 != 3.0."""
    return type(a) is type(b) and a == b


@dataclass(frozen=True)
class Entry:
    """A raw payload pending id assignment."""

    fields: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def coerce(cls, payload: Entry | Mapping[str, Any] | Item) -> Entry:
        if isinstance(payload, Entry):
            return payload
        if isinstance(payload, Item):
            return cls(dict(payload.data))
        if not isinstance(payload, Mapping):
            raise MalformedInput(f"entry must be a JSON object, got {type(payload).__name__}")
        return cls(dict(payload))

    def assign_id(self, item_id: int | float) -> Item:
        """Return the stored form of this entry. Any id the caller sent is overwritten."""
        data = dict(self.fields)
        data["id"] = item_id
        return Item(data)


@dataclass(frozen=True)
class Item:
    """A stored record with a numeric id."""

    data: Dict[str, Any]

    def __post_init__(self):
        if not is_item_id(self.data.get("id")):
            raise MalformedInput(f"item id must be numeric, got {self.data.get('id')!r}")

    @property
    def id(self) -> int | float:
        return self.data["id"]

    def to_json(self) -> Dict[str, Any]:
        return dict(self.data)
