"""Shape descriptors — declarative templates for decoding API payloads.

A shape mirrors the nesting of the target type exactly once: an ``Object``
lists the fields it cares about, a ``ListOf`` names the shape of its
elements, and leaves are ``Scalar`` or ``Raw``.  Shapes are frozen and built
bottom-up, so they can never contain cycles and can be shared freely
between threads.

    ORDER = Object.of(
        Order,
        line_items=Object.of(ListObject, data=ListOf(Object.of(LineItem))),
    )
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, get_args, get_type_hints

from oms_client.domain.model.value_objects import _Missing


class Shape:
    """Base class of every shape variant."""

    def describe(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class Scalar(Shape):
    """A JSON string, number, boolean or null, decoded as-is.

    ``kind`` optionally narrows the accepted Python type.  ``int`` never
    accepts booleans; ``float`` also accepts integers.  ``null`` is always
    accepted.
    """

    kind: type | None = None

    def __post_init__(self) -> None:
        if self.kind not in (None, str, int, float, bool):
            raise TypeError(f"Unsupported scalar kind: {self.kind!r}")

    def accepts(self, value: Any) -> bool:
        if value is None:
            return True
        if isinstance(value, (dict, list)):
            return False
        if self.kind is None:
            return True
        if isinstance(value, bool):
            return self.kind is bool
        if self.kind is float:
            return isinstance(value, (int, float))
        return isinstance(value, self.kind)

    def describe(self) -> str:
        return self.kind.__name__ if self.kind else "scalar"


@dataclass(frozen=True)
class Raw(Shape):
    """Any JSON value, passed through untouched (free-form maps like metadata)."""

    def describe(self) -> str:
        return "any"


@dataclass(frozen=True)
class Object(Shape):
    """A JSON object with a fixed set of interesting fields.

    Undeclared keys in the input are ignored.  The decoded field mapping is
    handed to ``into`` as keyword arguments, or returned read-only when
    ``into`` is ``None``.
    """

    fields: Mapping[str, Shape]
    into: Callable[..., Any] | None = None

    def __post_init__(self) -> None:
        for name, shape in self.fields.items():
            if not isinstance(shape, Shape):
                raise TypeError(f"Field {name!r} is not a shape: {shape!r}")
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    @classmethod
    def of(cls, target: type, **overrides: Shape) -> Object:
        """Shape for a dataclass: every field a ``Scalar`` unless overridden.

        The scalar kind comes from the field annotation: ``Maybe[int]``
        decodes as ``Scalar(int)``; anything that is not a plain str, int,
        float or bool stays an untyped ``Scalar()``.
        """
        if not dataclasses.is_dataclass(target):
            raise TypeError(f"{target.__name__} is not a dataclass")
        names = [f.name for f in dataclasses.fields(target)]
        unknown = sorted(set(overrides) - set(names))
        if unknown:
            raise ValueError(
                f"{target.__name__} has no field(s) {', '.join(unknown)}"
            )
        hints = get_type_hints(target)
        return cls(
            {
                name: overrides[name] if name in overrides else _scalar_for(hints.get(name))
                for name in names
            },
            into=target,
        )

    def describe(self) -> str:
        return "object"


@dataclass(frozen=True)
class ListOf(Shape):
    """A JSON array whose elements all share one shape."""

    element: Shape

    def __post_init__(self) -> None:
        if not isinstance(self.element, Shape):
            raise TypeError(f"List element is not a shape: {self.element!r}")

    def describe(self) -> str:
        return "array"


SCALAR = Scalar()

_SCALAR_KINDS = (str, int, float, bool)


def _scalar_for(hint: Any) -> Scalar:
    kinds = [
        arg for arg in (get_args(hint) or (hint,))
        if arg is not type(None) and arg is not _Missing
    ]
    if len(kinds) == 1 and kinds[0] in _SCALAR_KINDS:
        return Scalar(kinds[0])
    return SCALAR
