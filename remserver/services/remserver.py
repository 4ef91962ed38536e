"""Session-backed mock data store.

All state lives in one blob under ``KEY`` in the session store: a mapping of
dataset name to a list of items. Every mutation reads the whole blob, changes
a copy and writes the whole blob back.
"""
from __future__ import annotations

import copy
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..exceptions import ConfigurationError, MalformedInput, SourceUnreadable
from ..storage.dataset_loader import DatasetLoader
from ..storage.items import Entry, Item, is_item_id, same_id
from ..storage.session_store import SessionStore

log = logging.getLogger(__name__)

KEY = "remserver"


def _item_ids(dataset: Iterable) -> List[int | float]:
    return [
        val["id"] for val in dataset
        if isinstance(val, dict) and is_item_id(val.get("id"))
    ]


def _find(dataset: List[Any], item_id) -> Optional[int]:
    for idx, val in enumerate(dataset):
        if isinstance(val, dict) and "id" in val and same_id(val["id"], item_id):
            return idx
    return None


class RemServer:
    """CRUD over named datasets stored in a single session."""

    def __init__(self, session: SessionStore, loader: DatasetLoader | None = None):
        self.session = session
        self.loader = loader or DatasetLoader()
        self._dataset: List[str] = []

    # --- Configuration / lifecycle ---

    def configure(self, sources: Iterable) -> "RemServer":
        """Set the files to load as default datasets. No I/O happens here."""
        self._dataset = [str(s) for s in sources]
        return self

    @property
    def default_datasets(self) -> List[str]:
        return list(self._dataset)

    def init(self) -> "RemServer":
        """Fill the session with the default datasets, replacing what was there.

        Raises ConfigurationError if any source cannot be read. Nothing is
        written in that case.
        """
        try:
            blob = self.loader.load(self._dataset)
        except SourceUnreadable as e:
            raise ConfigurationError(str(e)) from e
        self.session.set(KEY, blob)
        log.info("Session initiated with datasets: %s", ", ".join(blob) or "(none)")
        return self

    def has_dataset(self) -> bool:
        return self.session.has(KEY)

    # --- Dataset level ---

    def _blob(self) -> Dict[str, Any]:
        data = self.session.get(KEY)
        return copy.deepcopy(data) if isinstance(data, dict) else {}

    def get_dataset(self, name: str) -> List[Any]:
        """Return the named dataset, or an empty list if there is none."""
        dataset = self._blob().get(name)
        return dataset if isinstance(dataset, list) else []

    def save_dataset(self, name: str, dataset: List[Any]) -> "RemServer":
        data = self._blob()
        data[name] = dataset
        self.session.set(KEY, data)
        return self

    # --- Item level ---

    def get_item(self, name: str, item_id) -> Optional[Item]:
        # Stored items carry numeric ids; anything else is never found.
        if not is_item_id(item_id):
            return None
        dataset = self.get_dataset(name)
        idx = _find(dataset, item_id)
        if idx is None:
            return None
        return Item(dataset[idx])

    def add_item(self, name: str, entry: Entry | Mapping[str, Any]) -> Item:
        """Store ``entry`` with id one above the current max id (1 for an empty dataset)."""
        entry = Entry.coerce(entry)
        dataset = self.get_dataset(name)
        item = entry.assign_id(max(_item_ids(dataset), default=0) + 1)
        dataset.append(item.to_json())
        self.save_dataset(name, dataset)
        log.debug("Added item %s to dataset '%s'", item.id, name)
        return item

    def upsert_item(self, name: str, item_id, entry: Entry | Mapping[str, Any]) -> Item:
        """Replace the item with ``item_id`` in place, or append it if missing."""
        if not is_item_id(item_id):
            raise MalformedInput(f"item id must be numeric, got {item_id!r}")
        item = Entry.coerce(entry).assign_id(item_id)
        dataset = self.get_dataset(name)
        idx = _find(dataset, item_id)
        if idx is None:
            dataset.append(item.to_json())
        else:
            dataset[idx] = item.to_json()
        self.save_dataset(name, dataset)
        log.debug("Upserted item %s in dataset '%s' (%s)", item_id, name,
                  "appended" if idx is None else "replaced")
        return item

    def delete_item(self, name: str, item_id) -> None:
        dataset = self.get_dataset(name)
        idx = _find(dataset, item_id)
        if idx is not None:
            del dataset[idx]
            log.debug("Deleted item %s from dataset '%s'", item_id, name)
        self.save_dataset(name, dataset)
