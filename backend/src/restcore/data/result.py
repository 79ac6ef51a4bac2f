from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class Result:
    """Result set handed back by an Entity query."""

    def __init__(self, records: list[dict[str, Any]] | None = None) -> None:
        self.records = list(records or [])

    def count_results(self) -> int:
        return len(self.records)

    def first(self) -> dict[str, Any] | None:
        return self.records[0] if self.records else None

    def __iter__(self) -> Iterator[dict[str, Any]]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __repr__(self) -> str:
        return f"Result(count={len(self.records)})"
