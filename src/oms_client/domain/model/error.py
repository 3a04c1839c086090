"""The structured error body the API sends with non-2xx responses.

    {"object": "error", "type": "parameter_validation_error",
     "log_id": "...", "details": [{"message": "...", "param": "...",
     "code": "conekta.errors.parameter_validation..."}]}

Some endpoints put ``message`` and ``code`` at the top level instead of
(or as well as) inside ``details``.
"""

from __future__ import annotations

from dataclasses import dataclass

from oms_client.domain.model.shape import ListOf, Object
from oms_client.domain.model.value_objects import MISSING, Maybe


@dataclass(frozen=True)
class ErrorDetail:
    message: Maybe[str] = MISSING
    debug_message: Maybe[str] = MISSING
    param: Maybe[str] = MISSING
    code: Maybe[str] = MISSING


@dataclass(frozen=True)
class ApiErrorPayload:
    object: Maybe[str] = MISSING
    type: Maybe[str] = MISSING
    message: Maybe[str] = MISSING
    code: Maybe[str] = MISSING
    log_id: Maybe[str] = MISSING
    details: Maybe[tuple[ErrorDetail, ...]] = MISSING


API_ERROR_SHAPE = Object.of(
    ApiErrorPayload,
    details=ListOf(Object.of(ErrorDetail)),
)
