from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from sqlalchemy.orm import Session, SessionTransaction

from restcore.services.controller import ResourceController

logger = logging.getLogger(__name__)


class Verb(str, Enum):
    GET = "get"
    GET_ONE = "get_one"
    POST = "post"
    PUT = "put"
    PATCH = "patch"
    DELETE = "delete"


WRITE_VERBS = frozenset({Verb.POST, Verb.PUT, Verb.PATCH, Verb.DELETE})

HANDLERS: dict[Verb, Callable[..., Any]] = {
    Verb.GET: lambda controller: controller.get(),
    Verb.GET_ONE: lambda controller, id: controller.get_one(id),
    Verb.POST: lambda controller: controller.post(),
    Verb.PUT: lambda controller, id: controller.put(id),
    Verb.PATCH: lambda controller, id: controller.patch(id),
    Verb.DELETE: lambda controller, id: controller.delete(id),
}


def invoke(controller: ResourceController, verb: Verb | str, *args: Any) -> Any:
    return HANDLERS[Verb(verb)](controller, *args)


@dataclass
class TransactionState:
    is_atomic: bool = False
    should_rollback: bool = False

    def reset(self) -> None:
        self.is_atomic = True
        self.should_rollback = False


@dataclass(frozen=True)
class Success:
    value: Any
    failed: ClassVar[bool] = False


@dataclass(frozen=True)
class Failure:
    error: Exception
    failed: ClassVar[bool] = True


Outcome = Success | Failure


def dispatch(controller: ResourceController, verb: Verb | str, *args: Any) -> Outcome:
    try:
        return Success(invoke(controller, verb, *args))
    except Exception as exc:
        return Failure(exc)


class TransactionCoordinator:
    """Runs one controller operation inside an all-or-nothing transaction.

    The operation is attempted exactly once. Its outcome decides commit or
    rollback; a failure is re-raised untouched.
    """

    def __init__(self, session: Session, state: TransactionState) -> None:
        self._session = session
        self._state = state

    @property
    def state(self) -> TransactionState:
        return self._state

    def run_atomic(self, controller: ResourceController, verb: Verb | str, *args: Any) -> Any:
        verb = Verb(verb)
        if self._session.in_transaction():
            transaction = self._session.begin_nested()
        else:
            transaction = self._session.begin()
        self._state.reset()
        logger.debug("begin atomic %s on %s", verb.value, type(controller).__name__)

        outcome = dispatch(controller, verb, *args)
        self._state.should_rollback = outcome.failed
        self.finish(transaction)

        if isinstance(outcome, Failure):
            logger.warning(
                "atomic %s on %s rolled back: %s",
                verb.value,
                type(controller).__name__,
                outcome.error,
            )
            raise outcome.error
        return outcome.value

    def finish(self, transaction: SessionTransaction) -> None:
        if self._state.should_rollback:
            transaction.rollback()
            logger.debug("transaction rolled back")
        else:
            try:
                transaction.commit()
            except Exception:
                self._state.should_rollback = True
                raise
            logger.debug("transaction committed")
