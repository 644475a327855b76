"""
Tiny SELECT composer for queries with optional filters.

Conditions are written with `{}` where a value goes; each value is bound as
the next asyncpg placeholder ($1, $2, ...), so user input never ends up in
the SQL text.

    q = SelectQuery("SELECT * FROM orders")
    q.where("order_status = {}", "paid")
    q.order_by("create_time DESC").limit(10).offset(0)
    sql, args = q.build()
"""

from __future__ import annotations

from typing import Any


def escape_like(value: str) -> str:
    """
    Escape LIKE wildcards so `value` matches literally (default escape char `\\`).
    """
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SelectQuery:
    def __init__(self, base: str) -> None:
        self._base = base.strip()
        self._conditions: list[str] = []
        self._order_by: str | None = None
        self._limit: str | None = None
        self._offset: str | None = None
        self._args: list[Any] = []

    def _bind(self, value: Any) -> str:
        self._args.append(value)
        return f"${len(self._args)}"

    def where(self, condition: str, *values: Any) -> SelectQuery:
        placeholders = [self._bind(v) for v in values]
        self._conditions.append(condition.format(*placeholders))
        return self

    def order_by(self, clause: str) -> SelectQuery:
        self._order_by = clause
        return self

    def limit(self, value: int) -> SelectQuery:
        self._limit = self._bind(value)
        return self

    def offset(self, value: int) -> SelectQuery:
        self._offset = self._bind(value)
        return self

    def build(self) -> tuple[str, list[Any]]:
        parts = [self._base]
        if self._conditions:
            parts.append("WHERE " + " AND ".join(self._conditions))
        if self._order_by:
            parts.append(f"ORDER BY {self._order_by}")
        if self._limit is not None:
            parts.append(f"LIMIT {self._limit}")
        if self._offset is not None:
            parts.append(f"OFFSET {self._offset}")
        return " ".join(parts), list(self._args)
