from __future__ import annotations

from http import HTTPStatus
from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from restcore.api.schemas import ErrorResponse, FieldErrorResponse
from restcore.data.result import Result
from restcore.services.errors import ErrorReport


def send_result(name: str, result: Result, *, many: bool = False, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    content: Any = result.records if many else result.first()
    return JSONResponse(status_code=status_code, content=jsonable_encoder({name: content}))


def send_error(report: ErrorReport) -> JSONResponse:
    status_code = report.http_status
    body = ErrorResponse(
        http_status_code=status_code,
        status_text=HTTPStatus(status_code).phrase,
        title=report.title,
        dev_message=report.dev,
        code=report.code,
        more=report.more,
        validation_list=[
            FieldErrorResponse(field=item.field, message=item.message, code=item.code)
            for item in report.validation_list
        ],
    )
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body.model_dump(by_alias=True)),
    )
