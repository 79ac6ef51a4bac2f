from __future__ import annotations

import logging
from typing import Any

from restcore.data.entity import Entity
from restcore.data.model import Model
from restcore.data.payload import parse_payload
from restcore.data.result import Result
from restcore.data.search import SearchHelper
from restcore.services.context import RequestContext
from restcore.services.errors import BadRequestError, IntegrityFailure, NotFoundError
from restcore.services.resolver import ResourceResolver

logger = logging.getLogger(__name__)


class ResourceHooks:
    """Extension points run around a controller's save and delete logic.

    Defaults pass the payload through untouched. Any exception raised here
    aborts the rest of the operation.
    """

    def __init__(self, controller: ResourceController | None = None) -> None:
        self.controller = controller

    def before_save(self, payload: dict[str, Any], id: Any = None) -> dict[str, Any]:
        return payload

    def after_save(self, payload: dict[str, Any], id: Any) -> None:
        pass

    def before_delete(self, id: Any) -> None:
        pass

    def after_delete(self, id: Any) -> None:
        pass


class ResourceController:
    """Handles the REST verbs of one resource.

    Loads the resource's Model and Entity on first use and routes every
    operation through them.
    """

    singular_name: str | None = None
    plural_name: str | None = None
    hooks_class: type[ResourceHooks] = ResourceHooks

    def __init__(self, context: RequestContext, hooks: ResourceHooks | None = None) -> None:
        self.context = context
        self.settings = context.settings
        self.resolver = ResourceResolver(context)
        if hooks is None:
            hooks = self.hooks_class(self)
        elif hooks.controller is None:
            hooks.controller = self
        self.hooks = hooks
        self._model: Model | None = None
        self._entity: Entity | None = None

    @classmethod
    def derive_singular_name(cls, controllers_namespace: str) -> str:
        if cls.singular_name:
            return cls.singular_name
        name = f"{cls.__module__}.{cls.__qualname__}".removeprefix(controllers_namespace)
        return name.rsplit(".", 1)[-1].removesuffix("Controller")

    def get_controller_name(self, kind: str = "plural") -> str:
        if kind == "singular":
            if self.singular_name is None:
                self.singular_name = self.derive_singular_name(self.settings.namespaces.controllers)
            return self.singular_name
        if kind == "plural":
            if self.plural_name is None:
                self.plural_name = self.get_controller_name("singular") + "s"
            return self.plural_name
        raise ValueError(f"Unknown controller name type: {kind!r}")

    def get_model(self) -> Model:
        if self._model is None:
            self._model = self.resolver.resolve_model(self.get_controller_name("singular"))
        return self._model

    def get_search_helper(self) -> SearchHelper:
        return SearchHelper()

    def get_entity(self) -> Entity:
        if self._entity is None:
            entity = self.resolver.resolve_entity(
                self.get_controller_name("singular"),
                self.get_model(),
                self.get_search_helper(),
            )
            self._entity = self.configure_entity(entity)
        return self._entity

    def configure_entity(self, entity: Entity) -> Entity:
        return entity

    def read_payload(self) -> dict[str, Any] | None:
        return parse_payload(
            self.context.body,
            self.get_controller_name("singular"),
            self.get_model(),
            self.context.message_bag,
        )

    def get(self) -> Result:
        return self.get_entity().find()

    def get_one(self, id: Any) -> Result:
        result = self.get_entity().find_first(id)
        if result.count_results() == 0:
            raise NotFoundError(
                "Resource not available.",
                {"dev": "The resource you requested is not available.", "code": "43758093745021"},
                self.context.message_bag,
            )
        return result

    def post(self) -> Result:
        payload = self.read_payload()
        if not payload:
            raise BadRequestError(
                "There was an error adding new record.  Missing POST data.",
                {"dev": "Invalid data posted to the server", "code": "568136818916816555"},
                self.context.message_bag,
            )

        payload = self.hooks.before_save(self._filter_block_columns(payload), None)
        id = self.get_entity().save(payload)
        self.hooks.after_save(payload, id)
        logger.debug("created %s id=%s", self.get_controller_name("singular"), id)

        return self._reload(id, "created")

    def put(self, id: Any) -> Result:
        payload = self.read_payload()
        if not payload:
            raise BadRequestError(
                "There was an error updating an existing record.",
                {"dev": "Invalid data posted to the server", "code": "568136818916816"},
                self.context.message_bag,
            )

        payload = self.hooks.before_save(self._filter_block_columns(payload), id)
        id = self.get_entity().save(payload, id)
        self.hooks.after_save(payload, id)
        logger.debug("updated %s id=%s", self.get_controller_name("singular"), id)

        return self._reload(id, "updated")

    def patch(self, id: Any) -> Result:
        return self.put(id)

    def delete(self, id: Any) -> None:
        self.hooks.before_delete(id)
        self.get_entity().delete(id)
        self.hooks.after_delete(id)
        logger.debug("deleted %s id=%s", self.get_controller_name("singular"), id)

    def _filter_block_columns(self, payload: dict[str, Any]) -> dict[str, Any]:
        blocked = set(self.get_model().get_block_columns())
        return {name: value for name, value in payload.items() if name not in blocked}

    def _reload(self, id: Any, action: str) -> Result:
        result = self.get_entity().find_first(id)
        if result.count_results() == 0:
            verb = "newly created" if action == "created" else "just updated"
            raise IntegrityFailure(
                f"There was an error retrieving the {verb} record.",
                {
                    "dev": f"The resource you requested is not available after it was just {action}",
                    "code": "1238510381861",
                },
                self.context.message_bag,
            )
        return result
