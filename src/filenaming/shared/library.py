# Where: filenaming.shared.library
# What: Library entities (artist, album, medium, track, media file, storage root, pattern).
# Why: Naming and renaming features share one value model instead of live ORM objects.

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(slots=True)
class Artist:
    """Performer owning albums."""

    name: str | None = None
    folder_name: str | None = None
    id: int | None = None


@dataclass(slots=True)
class Medium:
    """Physical or digital medium of an album (disc, side set, ...)."""

    position: int = 1
    format: str | None = None
    title: str | None = None
    id: int | None = None

    @property
    def display_name(self) -> str:
        """Return the medium title, falling back to its format."""

        return self.title or self.format or ""


@dataclass(slots=True)
class Album:
    """Album released by an artist."""

    title: str | None = None
    release_date: date | None = None
    artist: Artist | None = None
    mediums: list[Medium] = field(default_factory=list)
    id: int | None = None


@dataclass(slots=True, eq=False)
class MediaFile:
    """A file on disk holding one rendition of a track."""

    path: str | None = None
    format: str | None = None
    quality: str | None = None
    size: int | None = None
    duration: float | None = None
    sidecar_path: str | None = None
    needs_rename: bool = True
    id: int | None = None
    track: Track | None = field(default=None, repr=False)


@dataclass(slots=True, eq=False)
class Track:
    """A track of an album; owns the media files rendering it."""

    title: str | None = None
    track_number: str | None = None
    album: Album | None = None
    medium: Medium | None = None
    files: list[MediaFile] = field(default_factory=list)
    id: int | None = None

    def add_file(self, media_file: MediaFile) -> MediaFile:
        """Attach ``media_file`` to this track and return it."""

        media_file.track = self
        self.files.append(media_file)
        return media_file

    @property
    def first_file(self) -> MediaFile | None:
        return self.files[0] if self.files else None


@dataclass(slots=True, frozen=True)
class StorageRoot:
    """Filesystem prefix under which library files live."""

    path: str
    name: str | None = None
    id: int | None = None

    @property
    def normalized_path(self) -> str:
        """Return the root path without trailing separators ("/" stays "/")."""

        stripped = self.path.rstrip("/")
        return stripped or "/"


@dataclass(slots=True, frozen=True)
class NamingPattern:
    """User-defined naming pattern; only ``pattern`` matters to naming."""

    pattern: str
    name: str | None = None
    is_active: bool = True
    is_default: bool = False
    id: int | None = None


__all__ = [
    "Album",
    "Artist",
    "MediaFile",
    "Medium",
    "NamingPattern",
    "StorageRoot",
    "Track",
]
