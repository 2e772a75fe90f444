"""Fragment resolution exports."""

from .fragment import Fragment
from .fragment_registry import (
    DEFAULT_MAX_RESOLUTION_DEPTH,
    DEFAULT_REFERENCE_KEY,
    FragmentRegistry,
)
from .resolution_errors import (
    CircularReferenceError,
    FragmentError,
    NavigationError,
    NotFoundError,
    ResolutionDepthError,
    ResolutionError,
    TypeMismatchError,
)
from .value_kinds import ValueKind, kind_of

__all__ = [
    "DEFAULT_MAX_RESOLUTION_DEPTH",
    "DEFAULT_REFERENCE_KEY",
    "CircularReferenceError",
    "Fragment",
    "FragmentError",
    "FragmentRegistry",
    "NavigationError",
    "NotFoundError",
    "ResolutionDepthError",
    "ResolutionError",
    "TypeMismatchError",
    "ValueKind",
    "kind_of",
]
