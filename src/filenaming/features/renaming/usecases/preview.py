"""
Summary: Build rename previews for files flagged as needing a rename.
Why: Callers review planned names before the executor touches the disk.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import PurePosixPath

from filenaming.shared.library import MediaFile, NamingPattern

from ..domain.models import RenamePreview
from .decision import RenameDecisionEngine


def build_previews(
    engine: RenameDecisionEngine,
    pattern: NamingPattern | str,
    media_files: Iterable[MediaFile],
) -> list[RenamePreview]:
    """Return previews for every file in ``media_files`` whose flag is set.

    ``new_full_path`` is the canonical full path; when no storage root owns the
    file it falls back to the rendered relative path.
    """

    pattern_text = pattern.pattern if isinstance(pattern, NamingPattern) else pattern
    previews: list[RenamePreview] = []
    for media_file in media_files:
        track = media_file.track
        if not media_file.needs_rename or track is None:
            continue

        relative = engine.naming.render_path(track, pattern_text, media_file)
        full_path = engine.expected_path(track, pattern_text, media_file) or relative
        album = track.album
        artist = album.artist if album else None

        previews.append(
            RenamePreview(
                id=media_file.id,
                current_name=PurePosixPath(media_file.path).name if media_file.path else "",
                new_name=PurePosixPath(relative).name,
                new_full_path=full_path,
                artist=artist.name if artist else None,
                album=album.title if album else None,
                title=track.title,
                track_number=track.track_number,
                quality=media_file.quality,
                format=media_file.format,
                need_rename=media_file.needs_rename,
            )
        )
    return previews


__all__ = ["build_previews"]
