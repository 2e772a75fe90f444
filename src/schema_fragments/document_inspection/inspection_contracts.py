"""Document inspection entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from schema_fragments.configuration.runtime_settings import ResolverSettings
from schema_fragments.fragment_resolution import FragmentRegistry
from schema_fragments.references import Reference


@dataclass(frozen=True)
class InspectionRequest:
    """Input contract for inspecting one entry document."""

    config_path: str | None = None
    base_dir: str | None = None
    schema_path: str | None = None
    pointer: str = ""


@dataclass(frozen=True)
class InspectionWorkspace:
    """Registry and entry coordinate prepared for one inspection."""

    settings: ResolverSettings
    registry: FragmentRegistry
    entry: Reference


@dataclass(frozen=True)
class ResolvedValue:
    """Dereferenced location and the value stored there."""

    requested: Reference
    reference: Reference
    value: Any


@dataclass(frozen=True)
class IndirectionEntry:
    """One indirection node found in a document and the coordinate it points to."""

    location: Reference
    target: Reference
    reference_string: str
