"""Reads the JSON files that seed a session's datasets."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, Tuple

from ..exceptions import SourceUnreadable

log = logging.getLogger(__name__)


def dataset_name(path) -> str:
    """Dataset name for a source file: its base name without extension."""
    return Path(path).stem


class DatasetLoader:
    """Loads dataset sources from disk."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def load_one(self, path) -> Tuple[str, Any]:
        p = Path(path)
        if not (p.is_file() and os.access(p, os.R_OK)):
            raise SourceUnreadable(p)
        try:
            with p.open("r", encoding=self.encoding) as f:
                value = json.load(f)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnreadable(p) from e
        except json.JSONDecodeError as e:
            raise SourceUnreadable(p, f"is not valid JSON ({e.msg} at line {e.lineno})") from e
        if not isinstance(value, list):
            raise SourceUnreadable(p, "is not a JSON array")
        return dataset_name(p), value

    def load(self, paths: Iterable) -> Dict[str, Any]:
        """Load every source; the first failing one aborts the whole load."""
        datasets: Dict[str, Any] = {}
        for path in paths:
            name, value = self.load_one(path)
            if name in datasets:
                log.warning("Dataset '%s' loaded twice; %s wins", name, path)
            datasets[name] = value
        return datasets
