"""Content loading exports."""

from .content_loaders import (
    ContentLoader,
    FileContentLoader,
    InMemoryContentLoader,
    LoadError,
    document_path_for,
    parse_document,
)

__all__ = [
    "ContentLoader",
    "FileContentLoader",
    "InMemoryContentLoader",
    "LoadError",
    "document_path_for",
    "parse_document",
]
