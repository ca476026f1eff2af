"""
Summary: Resolve the storage root owning a media file path.
Why: Canonical paths are relative to the root with the longest matching prefix.
"""

from __future__ import annotations

from collections.abc import Iterable

from filenaming.shared.library import StorageRoot

from ..domain.errors import DuplicateStorageRootError


class StorageRootIndex:
    """Longest-prefix lookup over a fixed set of storage roots.

    Prefixes only match on path-segment boundaries, so ``/music`` owns
    ``/music/a.mp3`` but not ``/musicvideos/a.mp3``. Two roots with the same
    normalized path are rejected at construction.
    """

    def __init__(self, roots: Iterable[StorageRoot]) -> None:
        ordered: list[StorageRoot] = []
        seen: set[str] = set()
        for root in roots:
            normalized = root.normalized_path
            if normalized in seen:
                raise DuplicateStorageRootError(normalized)
            seen.add(normalized)
            ordered.append(root)
        # Longest first, so the first hit is the longest prefix.
        self._roots: list[StorageRoot] = sorted(
            ordered,
            key=lambda root: len(root.normalized_path),
            reverse=True,
        )

    def __len__(self) -> int:
        return len(self._roots)

    @property
    def roots(self) -> list[StorageRoot]:
        return list(self._roots)

    def resolve(self, path: str | None) -> StorageRoot | None:
        """Return the root owning ``path``, or None when no root matches."""

        if not path:
            return None
        for root in self._roots:
            if is_under_root(path, root.normalized_path):
                return root
        return None


def is_under_root(path: str, root_path: str) -> bool:
    if root_path == "/":
        return path.startswith("/")
    return path == root_path or path.startswith(root_path + "/")


def relative_to_root(path: str, root_path: str) -> str:
    """Strip ``root_path`` and the following separator from ``path``."""

    if root_path == "/":
        return path[1:]
    return path[len(root_path) + 1 :]


__all__ = ["StorageRootIndex", "is_under_root", "relative_to_root"]
