from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str
    code: str | None = None


class MessageBag:
    """Collects validation messages raised by the data layer during one request.

    The bag is owned by the request context and handed explicitly to whatever
    builds an error report from it; nothing reads it implicitly.
    """

    def __init__(self) -> None:
        self._messages: list[FieldError] = []

    def add(self, message: str, field: str = "", code: str | None = None) -> None:
        self._messages.append(FieldError(field=field, message=message, code=code))

    def add_field_errors(self, errors: Iterable[FieldError]) -> None:
        self._messages.extend(errors)

    @property
    def messages(self) -> list[FieldError]:
        return list(self._messages)

    def get_string(self) -> str:
        return " ".join(item.message for item in self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __bool__(self) -> bool:
        return bool(self._messages)
