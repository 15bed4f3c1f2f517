"""Per-model registry of filterable fields, keyed by lowercase name."""

import re
import types
from enum import Enum
from functools import lru_cache
from typing import Annotated, Any, Callable, Mapping, Union, get_args, get_origin

from pydantic import BaseModel


class FieldKind(str, Enum):
    TEXT = "text"
    INTEGER = "integer"
    BOOLEAN = "boolean"


class CoercionError(ValueError):
    """Raw query value does not fit the field's type."""


def coerce_text(raw: str) -> str:
    return raw


# plain ASCII base-10; rejects "1_0", "+3", " 7 " and non-ASCII digits that int() accepts
_INTEGER_RE = re.compile(r"-?[0-9]+")


def coerce_integer(raw: str) -> int:
    if not _INTEGER_RE.fullmatch(raw):
        raise CoercionError(f"not an integer: {raw!r}")
    return int(raw)


def coerce_boolean(raw: str) -> bool:
    folded = raw.strip().lower()
    if folded == "true":
        return True
    if folded == "false":
        return False
    raise CoercionError(f"not a boolean: {raw!r}")


_COERCERS: dict[FieldKind, Callable[[str], Any]] = {
    FieldKind.TEXT: coerce_text,
    FieldKind.INTEGER: coerce_integer,
    FieldKind.BOOLEAN: coerce_boolean,
}


class FieldSpec(BaseModel):
    name: str
    kind: FieldKind

    def coerce(self, raw: str) -> Any:
        return _COERCERS[self.kind](raw)


FieldRegistry = Mapping[str, FieldSpec]


def _unwrap(annotation: Any) -> Any:
    """Strip Annotated[...] and Optional[...] down to the single concrete type."""
    origin = get_origin(annotation)
    if origin is Annotated:
        return _unwrap(get_args(annotation)[0])
    if origin is Union or origin is types.UnionType:
        args = [a for a in get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return _unwrap(args[0])
    return annotation


def kind_for(annotation: Any) -> FieldKind | None:
    tp = _unwrap(annotation)
    if get_origin(tp) is not None or not isinstance(tp, type):
        return None
    # bool subclasses int
    if issubclass(tp, bool):
        return FieldKind.BOOLEAN
    if issubclass(tp, int):
        return FieldKind.INTEGER
    if issubclass(tp, str):
        return FieldKind.TEXT
    return None


@lru_cache(maxsize=None)
def field_registry(model: type[BaseModel]) -> FieldRegistry:
    """Build (once per model) the lowercase-name -> FieldSpec map of filterable fields."""
    registry: dict[str, FieldSpec] = {}
    for name, info in model.model_fields.items():
        kind = kind_for(info.annotation)
        if kind is None:
            continue
        registry[name.lower()] = FieldSpec(name=name, kind=kind)
    return types.MappingProxyType(registry)
