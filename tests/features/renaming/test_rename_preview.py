"""Tests for building rename previews."""

from __future__ import annotations

from collections.abc import Callable

from filenaming.features.naming import FileNaming
from filenaming.features.renaming import RenameDecisionEngine, build_previews
from filenaming.shared.library import NamingPattern, StorageRoot, Track

TrackFactory = Callable[..., Track]

PATTERN = NamingPattern("{{artist}}/{{album}}/{{trackNumber}} - {{title}}.{{extension}}", id=3)


def test_previews_only_cover_flagged_files(make_track: TrackFactory) -> None:
    engine = RenameDecisionEngine(naming=FileNaming(), roots=[StorageRoot("/x")])
    flagged = make_track(title="Flagged", path="/x/flagged.mp3", media_file_id=1).files[0]
    settled = make_track(title="Settled", path="/x/settled.mp3", media_file_id=2).files[0]
    settled.needs_rename = False

    previews = build_previews(engine, PATTERN, [flagged, settled])

    assert len(previews) == 1
    preview = previews[0]
    assert preview.to_dict() == {
        "id": 1,
        "current_name": "flagged.mp3",
        "new_name": "01 - Flagged.mp3",
        "new_full_path": "/x/Test Artist/Test Album/01 - Flagged.mp3",
        "artist": "Test Artist",
        "album": "Test Album",
        "title": "Flagged",
        "track_number": "1",
        "quality": "320 kbps",
        "format": "mp3",
        "needRename": True,
    }


def test_preview_without_root_uses_relative_path(make_track: TrackFactory) -> None:
    engine = RenameDecisionEngine(naming=FileNaming(), roots=[])
    media_file = make_track(title="Loose", path="/tmp/loose.mp3").files[0]

    previews = build_previews(engine, PATTERN.pattern, [media_file])

    assert previews[0].new_full_path == "Test Artist/Test Album/01 - Loose.mp3"
