"""Document inspection domain exports."""

from .inspection_contracts import (
    IndirectionEntry,
    InspectionRequest,
    InspectionWorkspace,
    ResolvedValue,
)
from .inspection_use_case import (
    InspectionError,
    collect_indirections,
    prepare_workspace,
    resolve_entry,
)

__all__ = [
    "IndirectionEntry",
    "InspectionRequest",
    "InspectionWorkspace",
    "ResolvedValue",
    "InspectionError",
    "collect_indirections",
    "prepare_workspace",
    "resolve_entry",
]
