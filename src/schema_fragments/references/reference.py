"""Reference coordinates inside a graph of documents."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from urllib.parse import unquote

ROOT_POINTER = "/"


@dataclass(frozen=True)
class Reference:
    """Immutable coordinate: a document path plus an ordered sequence of segments.

    Identity is the location, never the value stored there, so two references are
    equal exactly when both the document path and the segments are equal.
    """

    document_path: str
    segments: tuple[str, ...] = ()

    @classmethod
    def root(cls, document_path: str) -> Reference:
        """Return the root coordinate of a document."""
        return cls(document_path, ())

    def document_root(self) -> Reference:
        return Reference(self.document_path, ())

    def child(self, *segments: str | int) -> Reference:
        """Return a new reference extended by `segments`."""
        return Reference(self.document_path, self.segments + tuple(str(s) for s in segments))

    def parent(self) -> Reference | None:
        if not self.segments:
            return None
        return Reference(self.document_path, self.segments[:-1])

    def resolve(self, reference_string: str) -> Reference:
        """Resolve `<path>#<pointer>` against this reference's document.

        An empty path keeps the current document; otherwise the path is resolved
        against the directory of the current document path. Leading `..` segments
        that climb above that directory are kept. A missing pointer
        addresses the document root.
        """
        path, separator, pointer = reference_string.partition("#")
        if not separator:
            pointer = ROOT_POINTER
        document_path = self.document_path
        if path:
            document_path = _join_document_path(document_path, path)
        segments = tuple(unquote(part) for part in pointer.split("/") if part)
        return Reference(document_path, segments)

    def is_ancestor_of(self, other: Reference) -> bool:
        """Return True when `other` lies strictly below this reference in the same document."""
        depth = len(self.segments)
        return (
            self.document_path == other.document_path
            and depth < len(other.segments)
            and other.segments[:depth] == self.segments
        )

    @property
    def pointer(self) -> str:
        return "".join(f"/{segment}" for segment in self.segments)

    def __str__(self) -> str:
        return f"{self.document_path}#{self.pointer}"


def _join_document_path(document_path: str, path: str) -> str:
    if path.startswith("/"):
        return posixpath.normpath(path)
    return posixpath.normpath(posixpath.join(posixpath.dirname(document_path), path))
