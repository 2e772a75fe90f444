"""Typed projection and navigation over dereferenced document values."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar

from schema_fragments.references import Reference

from .resolution_errors import NotFoundError, TypeMismatchError
from .value_kinds import ValueKind, key_text, kind_of

if TYPE_CHECKING:
    from .fragment_registry import FragmentRegistry

R = TypeVar("R")


@dataclass(frozen=True, repr=False)
class Fragment:
    """A resolved value together with the reference naming its location.

    Equality and hashing use the reference only, so fragments work as keys when
    generated types are deduplicated by schema location. The reference is always
    the dereferenced target, never an indirection node.
    """

    reference: Reference
    value: Any = field(compare=False)
    registry: FragmentRegistry = field(compare=False)

    @property
    def kind(self) -> ValueKind:
        return kind_of(self.value)

    def as_map(self) -> Mapping[Any, Any]:
        self._require_kind(ValueKind.MAPPING)
        return self.value

    def as_list(self) -> Sequence[Any]:
        self._require_kind(ValueKind.SEQUENCE)
        return self.value

    def as_string(self) -> str:
        self._require_kind(ValueKind.STRING)
        return self.value

    def as_boolean(self) -> bool:
        """Return the boolean value; string values are parsed as boolean literals."""
        kind = self.kind
        if kind is ValueKind.BOOLEAN:
            return self.value
        if kind is ValueKind.STRING:
            return self.value.lower() == "true"
        raise TypeMismatchError(self.reference, ValueKind.BOOLEAN.value, kind.value)

    def get_optional(self, *elements: str | int) -> Fragment | None:
        return self.registry.get_optional(self.reference.child(*elements))

    def get(self, *elements: str | int) -> Fragment:
        child_reference = self.reference.child(*elements)
        fragment = self.registry.get_optional(child_reference)
        if fragment is None:
            raise NotFoundError(child_reference)
        return fragment

    def __getitem__(self, key: str | int | tuple[str | int, ...]) -> Fragment:
        if isinstance(key, tuple):
            return self.get(*key)
        return self.get(key)

    def parent(self) -> Fragment | None:
        """Resolve the enclosing location of this fragment's dereferenced reference."""
        parent_reference = self.reference.parent()
        if parent_reference is None:
            return None
        return self.registry.get_optional(parent_reference)

    def items(self) -> Iterator[tuple[str, Fragment]]:
        keys = [key_text(key) for key in self.as_map()]
        return ((key, self.get(key)) for key in keys)

    def elements(self) -> Iterator[Fragment]:
        count = len(self.as_list())
        return (self.get(index) for index in range(count))

    def for_each(self, action: Callable[[str, Fragment], None]) -> None:
        for key, fragment in self.items():
            action(key, fragment)

    def for_each_indexed(self, action: Callable[[int, Fragment], None]) -> None:
        for index, fragment in enumerate(self.elements()):
            action(index, fragment)

    def map(self, transform: Callable[[str, Fragment], R]) -> list[R]:
        return [transform(key, fragment) for key, fragment in self.items()]

    def map_elements(self, transform: Callable[[Fragment], R]) -> list[R]:
        return [transform(fragment) for fragment in self.elements()]

    def map_indexed(self, transform: Callable[[int, Fragment], R]) -> list[R]:
        return [transform(index, fragment) for index, fragment in enumerate(self.elements())]

    def _require_kind(self, expected: ValueKind) -> None:
        actual = self.kind
        if actual is not expected:
            raise TypeMismatchError(self.reference, expected.value, actual.value)

    def __repr__(self) -> str:
        return f"Fragment(reference={self.reference}, kind={self.kind.value})"
