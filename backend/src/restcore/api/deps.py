from __future__ import annotations

from collections.abc import Generator
from typing import Any

from fastapi import Depends, Request

from restcore.infra.db.session import get_db
from restcore.services.context import RequestContext
from restcore.services.transaction import TransactionState


async def get_json_body(request: Request) -> Any:
    if not await request.body():
        return None
    try:
        return await request.json()
    except ValueError:
        return None


def get_request_context(
    request: Request,
    body: Any = Depends(get_json_body),
) -> Generator[RequestContext, None, None]:
    state = request.app.state
    for db in get_db(state.session_factory):
        yield RequestContext(
            db=db,
            settings=state.settings,
            registry=state.registry,
            transaction=TransactionState(),
            body=body,
        )
