"""Request executor: the one path every resource operation goes through.

    build path/body -> Transport -> non-2xx? ApiError : decode(shape)

Exactly one transport call per operation; nothing is retried, deduplicated
or cached here.  Create / capture / refund are therefore NOT idempotent at
this layer.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from oms_client.domain.exceptions import ApiError, OmsClientError, RequestEncodingError
from oms_client.domain.model.error import API_ERROR_SHAPE, ApiErrorPayload, ErrorDetail
from oms_client.domain.model.shape import Shape
from oms_client.domain.model.value_objects import MISSING
from oms_client.domain.result import Err, Ok, Result
from oms_client.domain.service.decoder import decode
from oms_client.domain.transport import HttpMethod, RawResponse, Transport

logger = logging.getLogger(__name__)


class RequestExecutor:

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def execute(
        self,
        method: HttpMethod,
        path: str,
        shape: Shape,
        *,
        query: Mapping[str, str] | None = None,
        attrs: Mapping[str, Any] | None = None,
    ) -> Result[Any, OmsClientError]:
        """Run one request and decode a successful body with *shape*.

        *attrs* is sent verbatim as the JSON body; ``None`` sends no body.
        """
        body: bytes | None = None
        if attrs is not None:
            encoded = encode_body(attrs)
            if encoded.is_err():
                return encoded
            body = encoded.value

        logger.debug("%s %s query=%s", method.value, path, dict(query or {}))
        return self._transport.request(method, path, query, body).and_then(
            lambda response: self._interpret(method, path, response, shape)
        )

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _interpret(
        method: HttpMethod, path: str, response: RawResponse, shape: Shape
    ) -> Result[Any, OmsClientError]:
        if not response.is_success:
            error = api_error_from_response(response)
            logger.info(
                "%s %s failed with HTTP %d (%s)",
                method.value,
                path,
                response.status,
                error.type or "unstructured",
            )
            return Err(error)

        result = decode(response.body, shape)
        if result.is_err():
            logger.warning(
                "%s %s returned an undecodable body: %s",
                method.value,
                path,
                result.error,
            )
        return result


def resource_path(endpoint: str, *segments: str) -> str:
    """Join *endpoint* and id segments; each id is one opaque path segment."""
    path = endpoint.rstrip("/")
    for segment in segments:
        path += "/" + quote(str(segment), safe="")
    return path


def encode_body(attrs: Mapping[str, Any]) -> Result[bytes, RequestEncodingError]:
    if not isinstance(attrs, Mapping):
        return Err(
            RequestEncodingError(
                f"Attributes must be a mapping, got {type(attrs).__name__}"
            )
        )
    try:
        return Ok(json.dumps(dict(attrs), default=_plain).encode("utf-8"))
    except (TypeError, ValueError) as exc:
        return Err(RequestEncodingError(f"Attributes are not JSON serializable: {exc}"))


def _plain(value: Any) -> Any:
    # Decoded free-form values are read-only mappings; send them back as objects.
    if isinstance(value, Mapping):
        return dict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def api_error_from_response(response: RawResponse) -> ApiError:
    """Build an ``ApiError`` from a non-2xx response.

    Falls back to the raw body text when the body is not an error object.
    """
    payload = decode(response.body, API_ERROR_SHAPE).unwrap_or(None)
    if not isinstance(payload, ApiErrorPayload):
        return ApiError(status=response.status, raw_body=response.text)

    details = tuple(d for d in payload.details or () if isinstance(d, ErrorDetail))
    first = details[0] if details else ErrorDetail()
    return ApiError(
        status=response.status,
        type=_text(payload.type),
        message=_text(payload.message) or _text(first.message),
        code=_text(payload.code) or _text(first.code),
        details=details,
        log_id=_text(payload.log_id),
        raw_body=response.text,
    )


def _text(value: Any) -> str | None:
    if value is MISSING or value is None:
        return None
    return str(value)
