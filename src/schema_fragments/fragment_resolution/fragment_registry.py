"""Loading, caching and dereferencing of documents addressed by references."""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any

from schema_fragments.content_loading import ContentLoader
from schema_fragments.references import Reference

from .fragment import Fragment
from .resolution_errors import (
    CircularReferenceError,
    NavigationError,
    NotFoundError,
    ResolutionDepthError,
)
from .value_kinds import ValueKind, key_text, kind_of

DEFAULT_REFERENCE_KEY = "$ref"
DEFAULT_MAX_RESOLUTION_DEPTH = 64

_LOGGER = logging.getLogger(__name__)


class FragmentRegistry:
    """Resolves references to fragments, loading each document at most once.

    The document cache is append-only for the lifetime of the registry; documents
    are treated as immutable while a registry is in use.
    """

    def __init__(
        self,
        content_loader: ContentLoader,
        *,
        document_cache: MutableMapping[str, Any] | None = None,
        reference_key: str = DEFAULT_REFERENCE_KEY,
        max_depth: int = DEFAULT_MAX_RESOLUTION_DEPTH,
    ) -> None:
        if max_depth <= 0:
            raise ValueError("max_depth must be greater than zero.")
        self._content_loader = content_loader
        self._documents: MutableMapping[str, Any] = (
            {} if document_cache is None else document_cache
        )
        self._reference_key = reference_key
        self._max_depth = max_depth

    @property
    def reference_key(self) -> str:
        return self._reference_key

    @property
    def max_depth(self) -> int:
        return self._max_depth

    def load_document(self, path: str) -> Any:
        """Return the root value of a document, loading it on first use."""
        if path in self._documents:
            return self._documents[path]
        _LOGGER.debug("Loading document %s", path)
        document = self._content_loader.load_map(path)
        self._documents[path] = document
        return document

    def register_document(self, path: str, document: Any) -> None:
        """Seed the cache with an already parsed document."""
        if path in self._documents:
            raise ValueError(f"Document already loaded: {path}")
        _LOGGER.debug("Registering preloaded document %s", path)
        self._documents[path] = document

    def raw_value_at(self, reference: Reference) -> Any | None:
        """Return the value stored at `reference` without following indirection.

        Returns None when a key or index along the path is absent. Raises
        NavigationError when a segment has to descend into a scalar or indexes a
        sequence with something other than a non-negative integer.
        """
        current = self.load_document(reference.document_path)
        for segment in reference.segments:
            if current is None:
                return None
            if segment == "":
                continue
            kind = kind_of(current)
            if kind is ValueKind.MAPPING:
                current = _lookup_key(current, segment)
            elif kind is ValueKind.SEQUENCE:
                index = _parse_index(reference, segment)
                current = current[index] if index < len(current) else None
            else:
                raise NavigationError(
                    reference, f"cannot descend into {kind.value} at segment '{segment}'"
                )
        return current

    def resolve(self, reference: Reference) -> tuple[Reference, Any] | None:
        """Follow indirection nodes from `reference` to a terminal value.

        Returns the dereferenced `(reference, value)` pair, or None when any
        coordinate on the chain has no value.
        """
        current = reference
        chain: list[Reference] = []
        visited: set[Reference] = set()
        while True:
            value = self.raw_value_at(current)
            if value is None:
                return None
            target = self.indirection_target(value)
            if target is None:
                return current, value
            if current in visited:
                raise CircularReferenceError(reference, [*chain, current])
            if len(chain) >= self._max_depth:
                raise ResolutionDepthError(reference, self._max_depth)
            visited.add(current)
            chain.append(current)
            next_reference = current.resolve(target)
            _LOGGER.debug("Following %s -> %s", current, next_reference)
            current = next_reference

    def get_optional(self, reference: Reference) -> Fragment | None:
        resolved = self.resolve(reference)
        if resolved is None:
            return None
        resolved_reference, value = resolved
        return Fragment(resolved_reference, value, self)

    def get(self, reference: Reference) -> Fragment:
        fragment = self.get_optional(reference)
        if fragment is None:
            raise NotFoundError(reference)
        return fragment

    def indirection_target(self, value: Any) -> str | None:
        """Return the reference string of an indirection node, or None for other values."""
        if not isinstance(value, Mapping):
            return None
        target = value.get(self._reference_key)
        return target if isinstance(target, str) else None


def _lookup_key(mapping: Mapping[Any, Any], segment: str) -> Any | None:
    if segment in mapping:
        return mapping[segment]
    # YAML turns keys such as `200:` or `true:` into non-string scalars.
    for key, value in mapping.items():
        if not isinstance(key, str) and key_text(key) == segment:
            return value
    return None


def _parse_index(reference: Reference, segment: str) -> int:
    if not (segment.isascii() and segment.isdigit()):
        raise NavigationError(reference, f"'{segment}' is not a valid sequence index")
    return int(segment)
