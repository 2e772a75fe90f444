"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

from schema_fragments.fragment_resolution import (
    DEFAULT_MAX_RESOLUTION_DEPTH,
    DEFAULT_REFERENCE_KEY,
)

DEFAULT_CONFIG_FILENAME = "resolver.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = f"""# Resolver configuration template for schema-fragments.
# Relative paths in base_dir are resolved against this file's directory;
# schema and components are resolved against base_dir.

# Directory every document path is relative to.
base_dir: "."

# Entry document, e.g. openapi.yaml. Can be overridden with --schema.
schema: "<REQUIRED>"

# Documents to load up front, in addition to those reached through references.
components: []

resolution:
  # Key that marks an indirection node.
  reference_key: "{DEFAULT_REFERENCE_KEY}"
  # Maximum number of indirection hops followed for one lookup.
  max_depth: {DEFAULT_MAX_RESOLUTION_DEPTH}
"""


def build_placeholder_configuration() -> str:
    """Build a YAML resolver configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder resolver configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(
            f"Resolver configuration file already exists: {destination.resolve()}"
        )
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
