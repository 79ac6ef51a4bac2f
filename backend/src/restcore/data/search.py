from __future__ import annotations

from typing import Any

from sqlalchemy import Select


class SearchHelper:
    """Search configuration applied to collection queries.

    Controllers override ``get_search_helper`` to hand a preconfigured helper
    to the entity before it is built.
    """

    def __init__(self, filters: dict[str, Any] | None = None, order_by: list[str] | None = None) -> None:
        self.filters = dict(filters or {})
        self.order_by = list(order_by or [])

    def apply(self, stmt: Select, mapped: type) -> Select:
        for name, value in self.filters.items():
            stmt = stmt.where(getattr(mapped, name) == value)
        for name in self.order_by:
            column = getattr(mapped, name.lstrip("-"))
            stmt = stmt.order_by(column.desc() if name.startswith("-") else column.asc())
        return stmt
