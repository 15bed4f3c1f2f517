"""Equality predicates built from query parameters that name model fields."""

from typing import Annotated, Any, Iterable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from offset_pager.core.logging import get_logger
from offset_pager.pagination.fields import CoercionError, FieldRegistry

log = get_logger(__name__)


class _FieldEquals(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: str  # attribute name on the record
    param: str  # query key as the client spelled it
    raw_value: str

    def matches(self, record: Any) -> bool:
        return getattr(record, self.field, None) == self.value

    def render(self) -> str:
        """Canonical text used when the filter is carried into navigation links."""
        return str(self.value)


class TextEquals(_FieldEquals):
    kind: Literal["text"] = "text"
    value: str

    def render(self) -> str:
        return self.value


class IntegerEquals(_FieldEquals):
    kind: Literal["integer"] = "integer"
    value: int

    def matches(self, record: Any) -> bool:
        actual = getattr(record, self.field, None)
        return not isinstance(actual, bool) and actual == self.value


class BooleanEquals(_FieldEquals):
    kind: Literal["boolean"] = "boolean"
    value: bool

    def matches(self, record: Any) -> bool:
        return getattr(record, self.field, None) is self.value

    def render(self) -> str:
        return "True" if self.value else "False"


Predicate = Annotated[Union[TextEquals, IntegerEquals, BooleanEquals], Field(discriminator="kind")]

_VARIANTS: dict[str, type[_FieldEquals]] = {
    "text": TextEquals,
    "integer": IntegerEquals,
    "boolean": BooleanEquals,
}


class Conjunction(BaseModel):
    """AND of field predicates; empty means everything matches."""

    model_config = ConfigDict(frozen=True)

    terms: tuple[Predicate, ...] = ()

    def matches(self, record: Any) -> bool:
        return all(term.matches(record) for term in self.terms)

    def __bool__(self) -> bool:
        return bool(self.terms)


def build_filters(candidates: Iterable[tuple[str, str]], registry: FieldRegistry) -> Conjunction:
    """
    Turn (key, raw_value) candidates into a conjunction of equality predicates.
    Keys naming no field, and values that don't coerce to the field's type, are
    dropped one by one; the remaining candidates still apply.
    """
    terms = []
    for param, raw_value in candidates:
        spec = registry.get(param.lower())
        if spec is None:
            log.debug("filter_dropped", param=param, reason="unknown_field")
            continue
        try:
            value = spec.coerce(raw_value)
        except CoercionError:
            log.debug("filter_dropped", param=param, reason="invalid_value", kind=spec.kind.value)
            continue
        variant = _VARIANTS[spec.kind.value]
        terms.append(variant(field=spec.name, param=param, raw_value=raw_value, value=value))
    return Conjunction(terms=tuple(terms))
