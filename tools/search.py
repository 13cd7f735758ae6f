from __future__ import annotations

from typing import Iterable

from tools.registry import get_tools
from tools.types import ToolRecord


def normalize_query(raw: str | None) -> str:
    return (raw or "").lower()


def _matches(tool: ToolRecord, query: str) -> bool:
    return (
        query in tool.name.lower()
        or query in tool.description.lower()
        or query in tool.category
    )


def search_tools(
    query: str | None = None,
    category: str | None = None,
    tools: Iterable[ToolRecord] | None = None,
) -> list[ToolRecord]:
    """Case-insensitive substring match on name/description/category, then exact category filter.

    An empty query keeps every record; an empty category applies no filter.
    Searches the built-in catalog unless ``tools`` is given.
    """
    if tools is None:
        tools = get_tools()
    q = normalize_query(query)
    results = [t for t in tools if not q or _matches(t, q)]
    if category:
        results = [t for t in results if t.category == category]
    return results
