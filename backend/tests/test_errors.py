import json

from restcore.api.output import send_error
from restcore.services.errors import (
    BadRequestError,
    ErrorReport,
    HTTPError,
    IntegrityFailure,
    NotFoundError,
    ValidationException,
)
from restcore.services.messages import FieldError, MessageBag


def test_error_report_reads_known_keys() -> None:
    report = ErrorReport.from_error_list({"dev": "boom", "code": "42", "more": {"hint": "x"}}, MessageBag())

    assert report.dev == "boom"
    assert report.code == "42"
    assert report.more == {"hint": "x"}
    assert report.title == ""
    assert report.validation_list == ()


def test_error_report_falls_back_to_collected_messages() -> None:
    bag = MessageBag()
    bag.add("name is required", field="name")
    bag.add("label too long", field="label")

    report = ErrorReport.from_error_list({"code": "1"}, bag)

    assert report.dev == "name is required label too long"
    assert report.more is None


def test_error_report_dev_empty_when_nothing_collected() -> None:
    report = ErrorReport.from_error_list(None, MessageBag())

    assert report.dev == ""
    assert report.code is None


def test_http_errors_carry_status_and_title() -> None:
    assert NotFoundError("missing").status == 404
    assert BadRequestError("bad").status == 400
    assert IntegrityFailure("vanished").status == 500

    error = NotFoundError("Resource not available.", {"dev": "gone", "code": "7"})
    assert error.report.title == "Resource not available."
    assert error.report.dev == "gone"
    assert str(error) == "Resource not available."


def test_validation_exception_sends_400_envelope() -> None:
    bag = MessageBag()
    exc = ValidationException(
        "Project is invalid.",
        {"dev": "name missing", "code": "99"},
        [FieldError(field="name", message="Name is required.", code="required")],
        bag,
    )

    response = exc.send()
    body = json.loads(response.body)

    assert response.status_code == 400
    assert body["httpStatusCode"] == 400
    assert body["statusText"] == "Bad Request"
    assert body["title"] == "Project is invalid."
    assert body["devMessage"] == "name missing"
    assert body["code"] == "99"
    assert body["validationList"] == [{"field": "name", "message": "Name is required.", "code": "required"}]


def test_reports_carry_their_http_status() -> None:
    assert NotFoundError("missing").report.http_status == 404
    assert BadRequestError("bad").report.http_status == 400
    assert IntegrityFailure("vanished").report.http_status == 500
    assert HTTPError("conflict", status=409).report.http_status == 409
    assert ValidationException("invalid", None, [], MessageBag()).report.http_status == 400
    assert ErrorReport().http_status == 500


def test_send_error_takes_status_from_report() -> None:
    response = send_error(NotFoundError("Resource not available.").report)
    body = json.loads(response.body)

    assert response.status_code == 404
    assert body["httpStatusCode"] == 404
    assert body["statusText"] == "Not Found"
