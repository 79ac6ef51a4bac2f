from __future__ import annotations

from typing import Any

from restcore.data.entity import Entity


class ProjectEntity(Entity):
    """Normalizes project names before they reach the table."""

    def save(self, payload: dict[str, Any], id: Any = None) -> Any:
        if isinstance(payload.get("name"), str):
            payload = {**payload, "name": " ".join(payload["name"].split())}
        return super().save(payload, id)
