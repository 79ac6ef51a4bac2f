from __future__ import annotations

from typing import Any

from restcore.data.search import SearchHelper
from restcore.services.controller import ResourceController, ResourceHooks
from restcore.services.errors import ValidationException
from restcore.services.messages import FieldError


class ProjectHooks(ResourceHooks):
    def before_save(self, payload: dict[str, Any], id: Any = None) -> dict[str, Any]:
        if id is None or "name" in payload:
            name = payload.get("name")
            if not isinstance(name, str) or not name.strip():
                raise ValidationException(
                    "Project is invalid.",
                    {"dev": "A project needs a non-blank name.", "code": "30495817263540"},
                    [FieldError(field="name", message="Name is required.", code="required")],
                    self.controller.context.message_bag,
                )
        return payload


class ProjectController(ResourceController):
    hooks_class = ProjectHooks

    def get_search_helper(self) -> SearchHelper:
        return SearchHelper(order_by=["name"])


class TagController(ResourceController):
    pass
