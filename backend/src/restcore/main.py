from __future__ import annotations

from collections.abc import Sequence

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session, sessionmaker

from restcore.api.output import send_error
from restcore.api.routers.resources import build_resource_router
from restcore.infra.db.session import build_session_factory
from restcore.logging import configure_logging
from restcore.resources.controllers import ProjectController, TagController
from restcore.services.controller import ResourceController
from restcore.services.errors import HTTPError, ValidationException
from restcore.services.resolver import ResourceRegistry
from restcore.settings import Settings, load_settings

DEFAULT_CONTROLLERS: tuple[type[ResourceController], ...] = (ProjectController, TagController)


def create_app(
    settings: Settings | None = None,
    *,
    controllers: Sequence[type[ResourceController]] = DEFAULT_CONTROLLERS,
    registry: ResourceRegistry | None = None,
    session_factory: sessionmaker[Session] | None = None,
) -> FastAPI:
    active_settings = settings or load_settings()
    configure_logging(debug=active_settings.debug)

    app = FastAPI(title=active_settings.app_name, version=active_settings.app_version)
    app.state.settings = active_settings
    app.state.registry = registry or ResourceRegistry()
    app.state.session_factory = session_factory or build_session_factory(active_settings)

    @app.exception_handler(ValidationException)
    async def handle_validation(_: Request, exc: ValidationException) -> JSONResponse:
        return exc.send()

    @app.exception_handler(HTTPError)
    async def handle_http_error(_: Request, exc: HTTPError) -> JSONResponse:
        return send_error(exc.report)

    # ConfigurationError is left unhandled: it is a deployment defect, not a request error

    for controller_cls in controllers:
        app.include_router(build_resource_router(controller_cls, active_settings))

    return app


app = create_app()
