from __future__ import annotations

import importlib
import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from restcore.data.entity import Entity
from restcore.data.model import Model
from restcore.data.payload import root_key
from restcore.data.search import SearchHelper
from restcore.services.context import RequestContext
from restcore.services.errors import ConfigurationError

logger = logging.getLogger(__name__)

ModelFactory = Callable[[RequestContext], Model]
EntityFactory = Callable[[Model, SearchHelper], Entity]


@dataclass(frozen=True)
class ResourceBinding:
    model_factory: ModelFactory
    entity_factory: EntityFactory | None = None
    has_custom_entity: bool = False


class ResourceRegistry:
    """Explicit resource bindings, populated at startup.

    A resource missing from the registry is resolved by naming convention.
    """

    def __init__(self) -> None:
        self._bindings: dict[str, ResourceBinding] = {}

    def register(
        self,
        name: str,
        model_factory: ModelFactory,
        entity_factory: EntityFactory | None = None,
    ) -> ResourceBinding:
        binding = ResourceBinding(
            model_factory=model_factory,
            entity_factory=entity_factory,
            has_custom_entity=entity_factory is not None,
        )
        self._bindings[name] = binding
        return binding

    def get(self, name: str) -> ResourceBinding | None:
        return self._bindings.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._bindings


def import_string(dotted_path: str) -> Any:
    module_path, _, attribute = dotted_path.rpartition(".")
    if not module_path:
        raise ConfigurationError(f"'{dotted_path}' is not a dotted import path")
    try:
        module = importlib.import_module(module_path)
        return getattr(module, attribute)
    except (ImportError, AttributeError) as exc:
        raise ConfigurationError(f"Cannot resolve '{dotted_path}': {exc}") from exc


class ResourceResolver:
    def __init__(self, context: RequestContext) -> None:
        self.context = context
        self.namespaces = context.settings.namespaces
        self.entities_dir = Path(context.settings.application.entities_dir)
        self.registry = context.registry
        self._default_entity: type[Entity] | None = None

    def resolve_model(self, name: str) -> Model:
        binding = self.registry.get(name)
        if binding is not None:
            return binding.model_factory(self.context)
        model_type = import_string(f"{self.namespaces.models}.{name}")
        return model_type(self.context)

    def resolve_entity(self, name: str, model: Model, search_helper: SearchHelper) -> Entity:
        binding = self.registry.get(name)
        entity_type: EntityFactory
        if binding is not None:
            entity_type = binding.entity_factory if binding.has_custom_entity else self.default_entity_type()
        elif self.custom_entity_path(name).exists():
            module = self.custom_entity_path(name).stem
            entity_type = import_string(f"{self.namespaces.entities}.{module}.{name}Entity")
        else:
            entity_type = self.default_entity_type()

        logger.debug("resolved entity for %s: %s", name, getattr(entity_type, "__name__", entity_type))
        return entity_type(model, search_helper)

    def custom_entity_path(self, name: str) -> Path:
        return self.entities_dir / f"{root_key(name)}_entity.py"

    def default_entity_type(self) -> type[Entity]:
        if self._default_entity is None:
            self._default_entity = import_string(self.namespaces.default_entity)
        return self._default_entity
