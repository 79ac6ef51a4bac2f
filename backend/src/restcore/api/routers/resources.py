from __future__ import annotations

from collections.abc import Collection
from typing import Any

from fastapi import APIRouter, Depends, Response, status

from restcore.api.deps import get_request_context
from restcore.api.output import send_result
from restcore.data.payload import root_key
from restcore.services.context import RequestContext
from restcore.services.controller import ResourceController
from restcore.services.transaction import WRITE_VERBS, TransactionCoordinator, Verb, invoke
from restcore.settings import Settings


def build_resource_router(
    controller_cls: type[ResourceController],
    settings: Settings,
    atomic_verbs: Collection[Verb] = WRITE_VERBS,
) -> APIRouter:
    """Expose the five CRUD verbs of ``controller_cls``.

    Every route names its Verb statically; nothing from the request picks
    which controller method runs.
    """
    singular = controller_cls.derive_singular_name(settings.namespaces.controllers)
    singular_key = root_key(singular)
    plural_key = root_key(singular + "s")

    router = APIRouter(prefix=f"/{plural_key}", tags=[plural_key])

    def execute(context: RequestContext, verb: Verb, *args: Any) -> Any:
        controller = controller_cls(context)
        if verb in atomic_verbs:
            return TransactionCoordinator(context.db, context.transaction).run_atomic(controller, verb, *args)
        result = invoke(controller, verb, *args)
        context.db.commit()
        return result

    @router.get("", name=f"{plural_key}.get")
    def list_resources(context: RequestContext = Depends(get_request_context)) -> Response:
        return send_result(plural_key, execute(context, Verb.GET), many=True)

    @router.get("/{id}", name=f"{plural_key}.get_one")
    def get_resource(id: str, context: RequestContext = Depends(get_request_context)) -> Response:
        return send_result(singular_key, execute(context, Verb.GET_ONE, id))

    @router.post("", name=f"{plural_key}.post", status_code=status.HTTP_201_CREATED)
    def create_resource(context: RequestContext = Depends(get_request_context)) -> Response:
        return send_result(singular_key, execute(context, Verb.POST), status_code=status.HTTP_201_CREATED)

    @router.put("/{id}", name=f"{plural_key}.put")
    def update_resource(id: str, context: RequestContext = Depends(get_request_context)) -> Response:
        return send_result(singular_key, execute(context, Verb.PUT, id))

    @router.patch("/{id}", name=f"{plural_key}.patch")
    def patch_resource(id: str, context: RequestContext = Depends(get_request_context)) -> Response:
        return send_result(singular_key, execute(context, Verb.PATCH, id))

    @router.delete("/{id}", name=f"{plural_key}.delete", status_code=status.HTTP_204_NO_CONTENT)
    def delete_resource(id: str, context: RequestContext = Depends(get_request_context)) -> Response:
        execute(context, Verb.DELETE, id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
