"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from schema_fragments.fragment_resolution import (
    DEFAULT_MAX_RESOLUTION_DEPTH,
    DEFAULT_REFERENCE_KEY,
)


@dataclass(frozen=True)
class ResolutionSettings:
    """Indirection handling settings."""

    reference_key: str = DEFAULT_REFERENCE_KEY
    max_depth: int = DEFAULT_MAX_RESOLUTION_DEPTH


@dataclass(frozen=True)
class ResolverSettings:
    """Top-level resolver configuration aggregate."""

    path: Path | None
    base_dir: Path
    schema: Path | None
    components: tuple[Path, ...]
    resolution: ResolutionSettings
