"""Document inspection use-case service."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from schema_fragments.configuration import (
    ConfigurationError,
    ResolverSettings,
    default_settings,
    load_configuration,
)
from schema_fragments.content_loading import (
    ContentLoader,
    FileContentLoader,
    LoadError,
    document_path_for,
)
from schema_fragments.fragment_resolution import FragmentError, FragmentRegistry
from schema_fragments.fragment_resolution.value_kinds import ValueKind, key_text, kind_of
from schema_fragments.references import Reference

from .inspection_contracts import (
    IndirectionEntry,
    InspectionRequest,
    InspectionWorkspace,
    ResolvedValue,
)

_LOGGER = logging.getLogger(__name__)


class InspectionError(Exception):
    """Raised when a document inspection cannot be completed."""


def prepare_workspace(
    request: InspectionRequest,
    *,
    content_loader: ContentLoader | None = None,
) -> InspectionWorkspace:
    """Build the registry described by the request and pre-load component documents."""
    settings = _load_settings(request)
    if settings.schema is None:
        raise InspectionError("An entry document is required (--schema or 'schema' in config).")
    registry = FragmentRegistry(
        content_loader or FileContentLoader(settings.base_dir),
        reference_key=settings.resolution.reference_key,
        max_depth=settings.resolution.max_depth,
    )
    try:
        for component in settings.components:
            registry.load_document(document_path_for(component, settings.base_dir))
        entry_path = document_path_for(settings.schema, settings.base_dir)
        entry = Reference.root(entry_path).resolve(f"#{request.pointer}")
    except LoadError as exc:
        raise InspectionError(str(exc)) from exc
    _LOGGER.debug("Prepared workspace at %s for %s", settings.base_dir, entry)
    return InspectionWorkspace(settings=settings, registry=registry, entry=entry)


def resolve_entry(workspace: InspectionWorkspace) -> ResolvedValue:
    """Navigate to the workspace entry one segment at a time.

    Each step goes through the fragment API, so indirection nodes anywhere along
    the pointer are followed, not only at its end.
    """
    entry = workspace.entry
    try:
        fragment = workspace.registry.get(entry.document_root())
        for segment in entry.segments:
            fragment = fragment.get(segment)
    except (LoadError, FragmentError) as exc:
        raise InspectionError(str(exc)) from exc
    return ResolvedValue(
        requested=entry,
        reference=fragment.reference,
        value=fragment.value,
    )


def collect_indirections(workspace: InspectionWorkspace) -> tuple[IndirectionEntry, ...]:
    """List every indirection node below the entry coordinate, in document order.

    Only the entry document is scanned; targets are reported, not followed.
    """
    registry = workspace.registry
    try:
        start = registry.raw_value_at(workspace.entry)
    except (LoadError, FragmentError) as exc:
        raise InspectionError(str(exc)) from exc
    if start is None:
        raise InspectionError(f"Reference not found: {workspace.entry}")
    return tuple(_walk_indirections(registry, workspace.entry, start))


def _walk_indirections(
    registry: FragmentRegistry, location: Reference, value: Any
) -> Iterator[IndirectionEntry]:
    target = registry.indirection_target(value)
    if target is not None:
        yield IndirectionEntry(
            location=location, target=location.resolve(target), reference_string=target
        )
        return
    kind = kind_of(value)
    if kind is ValueKind.MAPPING:
        for key, child in value.items():
            yield from _walk_indirections(registry, location.child(key_text(key)), child)
    elif kind is ValueKind.SEQUENCE:
        for index, child in enumerate(value):
            yield from _walk_indirections(registry, location.child(index), child)


def _load_settings(request: InspectionRequest) -> ResolverSettings:
    try:
        if request.config_path:
            settings = load_configuration(request.config_path)
        else:
            settings = default_settings(request.base_dir or ".")
    except (ConfigurationError, OSError) as exc:
        raise InspectionError(str(exc)) from exc

    base_dir = Path(request.base_dir).resolve() if request.base_dir else settings.base_dir
    schema = Path(request.schema_path).resolve() if request.schema_path else settings.schema
    return ResolverSettings(
        path=settings.path,
        base_dir=base_dir,
        schema=schema,
        components=settings.components,
        resolution=settings.resolution,
    )
