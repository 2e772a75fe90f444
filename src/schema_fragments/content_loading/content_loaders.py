"""Document loaders that turn a document path into a parsed structural value."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, Protocol
from urllib.parse import quote, unquote

import yaml


class LoadError(Exception):
    """Raised when a document cannot be read, parsed, or has an unsupported extension."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to load document '{path}': {reason}")
        self.path = path
        self.reason = reason


class ContentLoader(Protocol):
    """Loads one document by its document path."""

    def load_map(self, path: str) -> Any:
        """Return the parsed root value of the document at `path`."""


DocumentParser = Callable[[str], Any]


def _parse_json(text: str) -> Any:
    return json.loads(text)


def _parse_yaml(text: str) -> Any:
    return yaml.safe_load(text)


_PARSERS_BY_EXTENSION: Mapping[str, DocumentParser] = {
    "json": _parse_json,
    "yaml": _parse_yaml,
    "yml": _parse_yaml,
}


def parse_document(path: str, text: str) -> Any:
    """Parse document text with the parser selected by the path extension."""
    parser = _select_parser(path)
    try:
        document = parser(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise LoadError(path, f"invalid content: {exc}") from exc
    # An empty document parses to None and is treated as absent.
    if document is not None and not isinstance(document, Mapping):
        raise LoadError(path, f"top-level value must be a mapping, got {type(document).__name__}")
    return document


def _select_parser(path: str) -> DocumentParser:
    extension = path.rsplit(".", 1)[-1] if "." in path else ""
    parser = _PARSERS_BY_EXTENSION.get(extension)
    if parser is None:
        raise LoadError(path, f"unsupported extension '{extension}'")
    return parser


class FileContentLoader:
    """Reads documents from disk relative to a fixed base directory."""

    def __init__(self, base_dir: Path | str) -> None:
        self._base_dir = Path(base_dir)

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def load_map(self, path: str) -> Any:
        _select_parser(path)
        # Absolute document paths still live under the base directory.
        file_path = self._base_dir / unquote(path).lstrip("/")
        try:
            text = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise LoadError(path, f"cannot read {file_path}: {exc}") from exc
        return parse_document(path, text)


class InMemoryContentLoader:
    """Serves documents from a preloaded `path -> text` mapping."""

    def __init__(self, contents: Mapping[str, str]) -> None:
        self._contents = dict(contents)

    def load_map(self, path: str) -> Any:
        _select_parser(path)
        text = self._contents.get(path)
        if text is None:
            raise LoadError(path, "no such in-memory document")
        return parse_document(path, text)


def document_path_for(file_path: Path | str, base_dir: Path | str) -> str:
    """Return the base-relative, percent-encoded document path of a file.

    The result uses `/` separators so relative references resolved against it
    by `Reference.resolve` land on the same keys the loader is later asked for.
    """
    resolved_base = Path(base_dir).resolve()
    resolved_file = Path(file_path).resolve()
    try:
        relative = resolved_file.relative_to(resolved_base)
    except ValueError as exc:
        raise LoadError(
            str(file_path), f"document is outside of base directory {resolved_base}"
        ) from exc
    return quote(relative.as_posix())
