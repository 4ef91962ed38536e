from __future__ import annotations

from typing import Any, Dict, List, Mapping, Tuple

DEFAULT_OFFSET = 0
DEFAULT_LIMIT = 25


def _non_negative_int(value, default: int) -> int:
    try:
        n = int(value)
    except (TypeError, ValueError):
        return default
    return n if n >= 0 else default


def page_args(args: Mapping[str, Any], default_limit: int = DEFAULT_LIMIT) -> Tuple[int, int]:
    """Read ``offset`` and ``limit`` from a query mapping, falling back to the defaults."""
    offset = _non_negative_int(args.get("offset"), DEFAULT_OFFSET)
    limit = _non_negative_int(args.get("limit"), default_limit)
    return offset, limit


def paginate(dataset: List[Any], offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT) -> Dict[str, Any]:
    return {
        "data": dataset[offset:offset + limit],
        "offset": offset,
        "limit": limit,
        "total": len(dataset),
    }
