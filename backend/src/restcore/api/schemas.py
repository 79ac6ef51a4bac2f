from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class FieldErrorResponse(BaseModel):
    field: str
    message: str
    code: str | None = None


class ErrorResponse(BaseModel):
    http_status_code: int = Field(serialization_alias="httpStatusCode")
    status_text: str = Field(serialization_alias="statusText")
    title: str = ""
    dev_message: str | None = Field(default=None, serialization_alias="devMessage")
    code: str | None = None
    more: Any = None
    validation_list: list[FieldErrorResponse] = Field(default_factory=list, serialization_alias="validationList")
