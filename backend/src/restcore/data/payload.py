from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from restcore.data.model import Model
from restcore.services.errors import ValidationException
from restcore.services.messages import FieldError, MessageBag


def root_key(singular: str) -> str:
    """``ProjectTask`` -> ``project_task``."""
    return re.sub(r"(?<!^)(?=[A-Z])", "_", singular).lower()


def parse_payload(body: Any, singular: str, model: Model, message_bag: MessageBag) -> dict[str, Any] | None:
    """Read the submitted record for ``singular`` out of a JSON body.

    Returns ``None`` when nothing usable was posted. A record that does not
    fit the model's shape raises ValidationException.
    """
    if not isinstance(body, Mapping):
        return None
    data = body.get(root_key(singular))
    if not data or not isinstance(data, Mapping):
        return None

    try:
        parsed = model.payload_schema().model_validate(dict(data))
    except ValidationError as exc:
        errors = [
            FieldError(
                field=".".join(str(part) for part in error["loc"]),
                message=error["msg"],
                code=error["type"],
            )
            for error in exc.errors()
        ]
        message_bag.add_field_errors(errors)
        raise ValidationException(
            f"Invalid {singular} submitted.",
            {"code": "72039485710293"},
            errors,
            message_bag,
        ) from exc

    return parsed.model_dump(exclude_unset=True)
