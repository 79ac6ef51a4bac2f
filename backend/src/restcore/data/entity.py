from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import inspect, select
from sqlalchemy.exc import IntegrityError

from restcore.data.model import Model
from restcore.data.result import Result
from restcore.data.search import SearchHelper
from restcore.services.errors import NotFoundError, ValidationException

logger = logging.getLogger(__name__)


class Entity:
    """Generic entity: good enough for any resource without custom logic.

    Writes are flushed, never committed; the request or transaction boundary
    decides whether they stick.
    """

    def __init__(self, model: Model, search_helper: SearchHelper) -> None:
        self.model = model
        self.search_helper = search_helper
        self.db = model.db

    @property
    def mapped(self) -> type:
        return self.model.mapped

    def find(self) -> Result:
        stmt = self.search_helper.apply(select(self.mapped), self.mapped)
        rows = self.db.scalars(stmt).all()
        return Result([self.model.to_dict(row) for row in rows])

    def find_first(self, id: Any) -> Result:
        # primary key lookup only, search filters do not apply here
        row = self.db.get(self.mapped, self._coerce_id(id))
        if row is None:
            return Result()
        return Result([self.model.to_dict(row)])

    def save(self, payload: dict[str, Any], id: Any = None) -> Any:
        if id is None:
            row = self.mapped(**payload)
            self.db.add(row)
        else:
            row = self._get_row(id)
            for name, value in payload.items():
                setattr(row, name, value)

        try:
            self.db.flush()
        except IntegrityError as exc:
            message_bag = self.model.context.message_bag
            message_bag.add(str(exc.orig), code="integrity")
            raise ValidationException(
                f"Could not save {type(self.model).__name__}.",
                {"code": "80358902347103"},
                message_bag.messages,
                message_bag,
            ) from exc

        new_id = getattr(row, self.model.primary_key)
        logger.debug("saved %s id=%s", type(self.model).__name__, new_id)
        return new_id

    def delete(self, id: Any) -> None:
        row = self._get_row(id)
        self.db.delete(row)
        self.db.flush()

    def _get_row(self, id: Any) -> Any:
        row = self.db.get(self.mapped, self._coerce_id(id))
        if row is None:
            raise NotFoundError(
                "Resource not available.",
                {"dev": f"No {type(self.model).__name__} with id {id!r}.", "code": "43758093745022"},
                self.model.context.message_bag,
            )
        return row

    def _coerce_id(self, id: Any) -> Any:
        column = inspect(self.mapped).primary_key[0]
        try:
            return column.type.python_type(id)
        except (NotImplementedError, TypeError, ValueError):
            return id
