"""Domain service: decode a JSON payload against a shape descriptor.

Decoding is pure: it reads the body and the shape, allocates a fresh value
and touches nothing else, so it is safe to call from any thread.

Rules:
  - a declared field absent from the input becomes ``MISSING``;
  - a field present with JSON ``null`` becomes ``None``;
  - undeclared input keys are dropped;
  - free-form (``Raw``) values are frozen: objects become read-only
    mappings and arrays become tuples;
  - lists are fail-fast: the first bad element aborts the whole decode and
    the error path starts with that element's index.
"""

from __future__ import annotations

import json
from types import MappingProxyType
from typing import Any

from oms_client.domain.exceptions import DecodeError, FieldMismatch, MalformedJson
from oms_client.domain.model.shape import ListOf, Object, Raw, Scalar, Shape
from oms_client.domain.model.value_objects import MISSING
from oms_client.domain.result import Err, Ok, Result


def decode(raw_body: bytes | str, shape: Shape) -> Result[Any, DecodeError]:
    """Parse *raw_body* as JSON and decode it with *shape*."""
    try:
        parsed = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        return Err(MalformedJson(f"Malformed JSON: {exc}"))
    except RecursionError:
        return Err(MalformedJson("Malformed JSON: nesting too deep"))
    return decode_value(parsed, shape)


def decode_value(value: Any, shape: Shape) -> Result[Any, DecodeError]:
    """Decode an already-parsed JSON value with *shape*."""
    try:
        return Ok(_decode(value, shape, ()))
    except FieldMismatch as exc:
        return Err(exc)
    except RecursionError:
        return Err(DecodeError("Value nested too deeply to decode"))


# --- Recursive walk -------------------------------------------------------------


def _decode(value: Any, shape: Shape, path: tuple[str | int, ...]) -> Any:
    if isinstance(shape, Raw):
        return _freeze(value)

    if isinstance(shape, Scalar):
        if not shape.accepts(value):
            raise FieldMismatch(path, shape.describe(), _json_type(value))
        return value

    # An explicit null is a legal value for any nested object or list,
    # but never for the document itself.
    if value is None and path:
        return None

    if isinstance(shape, Object):
        if not isinstance(value, dict):
            raise FieldMismatch(path, "object", _json_type(value))
        decoded = {
            name: _decode(value[name], field_shape, (*path, name))
            if name in value
            else MISSING
            for name, field_shape in shape.fields.items()
        }
        if shape.into is None:
            return MappingProxyType(decoded)
        return shape.into(**decoded)

    if isinstance(shape, ListOf):
        if not isinstance(value, list):
            raise FieldMismatch(path, "array", _json_type(value))
        return tuple(
            _decode(item, shape.element, (*path, index))
            for index, item in enumerate(value)
        )

    raise TypeError(f"Unknown shape: {shape!r}")


def _freeze(value: Any) -> Any:
    """Read-only copy of a free-form JSON value."""
    if isinstance(value, dict):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(item) for item in value)
    return value


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"
