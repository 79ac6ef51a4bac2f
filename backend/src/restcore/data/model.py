from __future__ import annotations

from functools import cache
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel, ConfigDict, create_model
from sqlalchemy import inspect

from restcore.infra.db.models import Base

if TYPE_CHECKING:
    from restcore.services.context import RequestContext


class Model:
    """Row shape of one resource plus the metadata the controller needs.

    Subclasses point ``mapped`` at a declarative class and list the fields a
    client may never write in ``block_columns``.
    """

    mapped: ClassVar[type[Base]]
    block_columns: ClassVar[tuple[str, ...]] = ()

    def __init__(self, context: RequestContext) -> None:
        self.context = context
        self.db = context.db

    @property
    def primary_key(self) -> str:
        return inspect(self.mapped).primary_key[0].name

    def get_block_columns(self) -> list[str]:
        return list(self.block_columns)

    @classmethod
    def column_names(cls) -> list[str]:
        return [attr.key for attr in inspect(cls.mapped).column_attrs]

    @classmethod
    @cache
    def payload_schema(cls) -> type[BaseModel]:
        fields: dict[str, Any] = {}
        for column in inspect(cls.mapped).columns:
            try:
                annotation: Any = column.type.python_type | None
            except NotImplementedError:
                annotation = Any
            fields[column.key] = (annotation, None)
        return create_model(
            f"{cls.__name__}Payload",
            __config__=ConfigDict(extra="forbid"),
            **fields,
        )

    def to_dict(self, row: Base) -> dict[str, Any]:
        return {name: getattr(row, name) for name in self.column_names()}
