"""Errors raised while navigating and resolving fragments."""

from __future__ import annotations

from collections.abc import Sequence

from schema_fragments.references import Reference


class FragmentError(Exception):
    """Base class for fragment navigation and resolution failures."""


class NavigationError(FragmentError):
    """Raised when a path segment cannot be applied to the value it addresses."""

    def __init__(self, reference: Reference, reason: str) -> None:
        super().__init__(f"Cannot navigate to {reference}: {reason}")
        self.reference = reference
        self.reason = reason


class TypeMismatchError(FragmentError):
    """Raised when a fragment value is not of the requested kind."""

    def __init__(self, reference: Reference, expected: str, actual: str) -> None:
        super().__init__(f"Reference {reference} points to {actual}, expected {expected}")
        self.reference = reference
        self.expected = expected
        self.actual = actual


class ResolutionError(FragmentError):
    """Raised when a reference cannot be resolved to a value."""

    def __init__(self, reference: Reference, message: str | None = None) -> None:
        super().__init__(message or f"Cannot resolve reference {reference}")
        self.reference = reference


class NotFoundError(ResolutionError):
    """Raised when a required reference has no value."""

    def __init__(self, reference: Reference) -> None:
        super().__init__(reference, f"Reference not found: {reference}")


class CircularReferenceError(ResolutionError):
    """Raised when an indirection chain revisits a coordinate."""

    def __init__(self, reference: Reference, chain: Sequence[Reference]) -> None:
        rendered = " -> ".join(str(item) for item in chain)
        super().__init__(reference, f"Circular reference while resolving {reference}: {rendered}")
        self.chain = tuple(chain)


class ResolutionDepthError(ResolutionError):
    """Raised when an indirection chain is longer than the configured limit."""

    def __init__(self, reference: Reference, max_depth: int) -> None:
        super().__init__(
            reference,
            f"Indirection chain starting at {reference} exceeds {max_depth} hops",
        )
        self.max_depth = max_depth
