"""Shared pytest fixtures building small track graphs."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

import pytest

from filenaming.shared.library import Album, Artist, MediaFile, Medium, Track

TrackFactory = Callable[..., Track]


@pytest.fixture
def make_track() -> TrackFactory:
    """Return a factory building a Track with one attached media file."""

    def _make(
        *,
        artist: str | None = "Test Artist",
        album: str | None = "Test Album",
        title: str | None = "Test Track",
        track_number: str | None = "1",
        release_date: date | None = date(2023, 5, 1),
        path: str | None = "/x/Test Artist - Test Album - Test Track.mp3",
        file_format: str | None = "mp3",
        quality: str | None = "320 kbps",
        mediums: int = 1,
        media_file_id: int | None = 1,
    ) -> Track:
        album_obj = Album(
            title=album,
            release_date=release_date,
            artist=Artist(name=artist) if artist is not None else None,
            mediums=[Medium(position=index, format="CD") for index in range(1, mediums + 1)],
        )
        track = Track(
            title=title,
            track_number=track_number,
            album=album_obj,
            medium=album_obj.mediums[0] if album_obj.mediums else None,
            id=1,
        )
        _ = track.add_file(
            MediaFile(path=path, format=file_format, quality=quality, id=media_file_id)
        )
        return track

    return _make


@pytest.fixture
def track(make_track: TrackFactory) -> Track:
    """Default single-disc track stored under ``/x``."""

    return make_track()
