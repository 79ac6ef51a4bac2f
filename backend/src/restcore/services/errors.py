from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from restcore.services.messages import FieldError, MessageBag

if TYPE_CHECKING:
    from fastapi.responses import JSONResponse


@dataclass(frozen=True)
class ErrorReport:
    """Standard set of properties the API stores for every error."""

    title: str = ""
    dev: str | None = None
    code: str | None = None
    more: Any = None
    validation_list: tuple[FieldError, ...] = ()
    http_status: int = 500

    @classmethod
    def from_error_list(cls, error_list: Mapping[str, Any] | None, message_bag: MessageBag) -> ErrorReport:
        error_list = error_list or {}
        dev = error_list.get("dev")
        # fall back on whatever the data layer collected for this request
        if dev is None:
            dev = message_bag.get_string()
        return cls(dev=dev, code=error_list.get("code"), more=error_list.get("more"))

    def with_validation(self, title: str, validation_list: Sequence[FieldError]) -> ErrorReport:
        return replace(self, title=title, validation_list=tuple(validation_list))


class ServiceError(Exception):
    """Base class for domain/service layer failures."""


class ConfigurationError(ServiceError):
    """A resource's Model or Entity type could not be resolved."""


class HTTPError(ServiceError):
    status: int = 500

    def __init__(
        self,
        title: str,
        error_list: Mapping[str, Any] | None = None,
        message_bag: MessageBag | None = None,
        *,
        status: int | None = None,
    ):
        if status is not None:
            self.status = status
        self.report = replace(
            ErrorReport.from_error_list(error_list, message_bag or MessageBag()),
            title=title,
            http_status=self.status,
        )
        super().__init__(title)


class NotFoundError(HTTPError):
    status = 404


class BadRequestError(HTTPError):
    status = 400


class IntegrityFailure(HTTPError):
    """A write appeared to succeed but the record could not be read back."""

    status = 500


class ValidationException(ServiceError):
    """Business-rule rejection carrying a field-level validation list."""

    status = 400

    def __init__(
        self,
        title: str,
        error_list: Mapping[str, Any] | None,
        validation_list: Sequence[FieldError],
        message_bag: MessageBag,
    ):
        report = ErrorReport.from_error_list(error_list, message_bag)
        self.report = replace(report.with_validation(title, validation_list), http_status=self.status)
        super().__init__(title)

    def send(self) -> JSONResponse:
        from restcore.api.output import send_error

        return send_error(self.report)
