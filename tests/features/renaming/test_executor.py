"""
Summary: Tests for the batch rename executor.
Why: Per-item failures must be reported without aborting or half-moving files.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock, call

import pytest
from pytest_mock import MockerFixture

from filenaming.features.naming import FileNaming
from filenaming.features.renaming import (
    CommitFailed,
    RenameDecisionEngine,
    RenameExecutor,
    StorageRootNotFound,
    build_final_path,
)
from filenaming.features.renaming.adapters.filesystem.local import LocalFileSystemGateway
from filenaming.shared.library import MediaFile, StorageRoot, Track

TrackFactory = Callable[..., Track]

PATTERN = "{{artist}}/{{title}}.{{extension}}"


@pytest.fixture
def files(mocker: MockerFixture) -> MagicMock:
    """Repository double recording saves and commits."""

    return mocker.MagicMock()


@pytest.fixture
def engine(tmp_path: Path) -> RenameDecisionEngine:
    return RenameDecisionEngine(naming=FileNaming(), roots=[StorageRoot(str(tmp_path))])


@pytest.fixture
def executor(engine: RenameDecisionEngine, files: MagicMock) -> RenameExecutor:
    return RenameExecutor(engine=engine, filesystem=LocalFileSystemGateway(), files=files)


def _media_file(make_track: TrackFactory, path: Path, *, title: str, media_file_id: int) -> MediaFile:
    track = make_track(title=title, path=str(path), media_file_id=media_file_id)
    return track.files[0]


def test_batch_continues_after_missing_source(
    tmp_path: Path,
    executor: RenameExecutor,
    files: MagicMock,
    make_track: TrackFactory,
) -> None:
    present = tmp_path / "old-one.mp3"
    _ = present.write_bytes(b"audio")
    first = _media_file(make_track, present, title="Song One", media_file_id=1)
    second = _media_file(make_track, tmp_path / "gone.mp3", title="Song Two", media_file_id=2)

    result = executor.rename_batch(PATTERN, [first, second])

    destination = tmp_path / "Test Artist" / "Song One.mp3"
    assert result.success_count == 1
    assert result.failed_count == 1
    assert len(result.errors) == 1
    assert result.errors[0].startswith("MediaFile 2: Source file not found")
    assert destination.read_bytes() == b"audio"
    assert not present.exists()
    assert first.path == str(destination)
    assert first.needs_rename is False
    assert second.needs_rename is True
    files.save.assert_called_once_with(first)
    files.commit.assert_called_once()


def test_sidecar_follows_primary_file(
    tmp_path: Path,
    executor: RenameExecutor,
    make_track: TrackFactory,
) -> None:
    source = tmp_path / "old.mp3"
    sidecar = tmp_path / "old.lrc"
    _ = source.write_bytes(b"audio")
    _ = sidecar.write_text("[00:01.00] hello", encoding="utf-8")
    media_file = _media_file(make_track, source, title="Song One", media_file_id=1)
    media_file.sidecar_path = str(sidecar)

    result = executor.rename_batch(PATTERN, [media_file])

    moved_sidecar = tmp_path / "Test Artist" / "Song One.lrc"
    assert result.success_count == 1
    assert moved_sidecar.read_text(encoding="utf-8") == "[00:01.00] hello"
    assert not sidecar.exists()
    assert media_file.sidecar_path == str(moved_sidecar)
    assert result.items[0].sidecar_destination == str(moved_sidecar)


def test_missing_sidecar_is_left_alone(
    tmp_path: Path,
    executor: RenameExecutor,
    make_track: TrackFactory,
) -> None:
    source = tmp_path / "old.mp3"
    _ = source.write_bytes(b"audio")
    media_file = _media_file(make_track, source, title="Song One", media_file_id=1)
    media_file.sidecar_path = str(tmp_path / "old.lrc")

    result = executor.rename_batch(PATTERN, [media_file])

    assert result.success_count == 1
    assert media_file.sidecar_path == str(tmp_path / "old.lrc")
    assert result.items[0].sidecar_destination is None


def test_files_not_flagged_are_skipped(
    tmp_path: Path,
    executor: RenameExecutor,
    files: MagicMock,
    make_track: TrackFactory,
) -> None:
    source = tmp_path / "old.mp3"
    _ = source.write_bytes(b"audio")
    media_file = _media_file(make_track, source, title="Song One", media_file_id=1)
    media_file.needs_rename = False

    result = executor.rename_batch(PATTERN, [media_file])

    assert result.skipped_count == 1
    assert result.success_count == 0
    assert result.failed_count == 0
    assert source.exists()
    files.save.assert_not_called()


def test_file_already_at_target_only_clears_flag(
    tmp_path: Path,
    executor: RenameExecutor,
    files: MagicMock,
    make_track: TrackFactory,
) -> None:
    target = tmp_path / "Test Artist" / "Song One.mp3"
    target.parent.mkdir()
    _ = target.write_bytes(b"audio")
    media_file = _media_file(make_track, target, title="Song One", media_file_id=1)

    result = executor.rename_batch(PATTERN, [media_file])

    assert result.success_count == 1
    assert result.renamed == []
    assert media_file.needs_rename is False
    assert target.exists()
    files.save.assert_called_once_with(media_file)


def test_existing_destination_is_not_overwritten(
    tmp_path: Path,
    executor: RenameExecutor,
    make_track: TrackFactory,
) -> None:
    source = tmp_path / "old.mp3"
    _ = source.write_bytes(b"new")
    occupied = tmp_path / "Test Artist" / "Song One.mp3"
    occupied.parent.mkdir()
    _ = occupied.write_bytes(b"existing")
    media_file = _media_file(make_track, source, title="Song One", media_file_id=7)

    result = executor.rename_batch(PATTERN, [media_file])

    assert result.failed_count == 1
    assert "destination already exists" in result.errors[0]
    assert result.errors[0].startswith("MediaFile 7: ")
    assert occupied.read_bytes() == b"existing"
    assert source.exists()


def test_root_override_replaces_resolved_root(
    tmp_path: Path,
    executor: RenameExecutor,
    make_track: TrackFactory,
) -> None:
    source = tmp_path / "old.mp3"
    _ = source.write_bytes(b"audio")
    media_file = _media_file(make_track, source, title="Song One", media_file_id=1)
    override = tmp_path / "artists" / "test-artist"

    result = executor.rename_batch(PATTERN, [media_file], root_override=f"{override}/")

    destination = override / "Test Artist" / "Song One.mp3"
    assert result.success_count == 1
    assert destination.exists()
    assert result.renamed[0].to_dict() == {"from": str(source), "to": str(destination)}


def test_file_outside_roots_fails(
    tmp_path: Path,
    files: MagicMock,
    make_track: TrackFactory,
) -> None:
    engine = RenameDecisionEngine(naming=FileNaming(), roots=[StorageRoot("/does/not/exist")])
    executor = RenameExecutor(engine=engine, filesystem=LocalFileSystemGateway(), files=files)
    source = tmp_path / "old.mp3"
    _ = source.write_bytes(b"audio")
    media_file = _media_file(make_track, source, title="Song One", media_file_id=3)

    result = executor.rename_batch(PATTERN, [media_file])

    assert result.errors == [f"MediaFile 3: No storage root found for path: {source}"]


def test_file_without_path_fails(executor: RenameExecutor, make_track: TrackFactory) -> None:
    media_file = make_track(path=None, media_file_id=4).files[0]

    result = executor.rename_batch(PATTERN, [media_file])

    assert result.errors == ["MediaFile 4: Media file has no path"]


def test_errors_are_capped_in_report(executor: RenameExecutor, tmp_path: Path, make_track: TrackFactory) -> None:
    media_files = [
        _media_file(make_track, tmp_path / f"missing-{index}.mp3", title=f"Song {index}", media_file_id=index)
        for index in range(1, 6)
    ]

    result = executor.rename_batch(PATTERN, media_files)

    assert result.failed_count == 5
    assert len(result.errors) == 5
    assert len(result.reported_errors) == 4
    assert result.reported_errors[-1] == "and 2 more..."
    assert result.to_dict()["errors"] == result.reported_errors


def test_failed_primary_move_restores_sidecar(
    mocker: MockerFixture,
    engine: RenameDecisionEngine,
    files: MagicMock,
    tmp_path: Path,
    make_track: TrackFactory,
) -> None:
    source = tmp_path / "old.mp3"
    sidecar = tmp_path / "old.lrc"
    destination = tmp_path / "Test Artist" / "Song One.mp3"
    sidecar_destination = tmp_path / "Test Artist" / "Song One.lrc"
    media_file = _media_file(make_track, source, title="Song One", media_file_id=9)
    media_file.sidecar_path = str(sidecar)

    filesystem = mocker.MagicMock()
    filesystem.exists.side_effect = lambda path: path in {source, sidecar}
    filesystem.same_file.return_value = False
    filesystem.move.side_effect = [None, OSError("disk full"), None]
    executor = RenameExecutor(engine=engine, filesystem=filesystem, files=files)

    result = executor.rename_batch(PATTERN, [media_file])

    assert filesystem.move.call_args_list == [
        call(sidecar, sidecar_destination),
        call(source, destination),
        call(sidecar_destination, sidecar),
    ]
    assert result.failed_count == 1
    assert "disk full" in result.errors[0]
    assert media_file.path == str(source)
    assert media_file.sidecar_path == str(sidecar)
    files.save.assert_not_called()


def test_directory_creation_failure_is_reported(
    mocker: MockerFixture,
    engine: RenameDecisionEngine,
    files: MagicMock,
    tmp_path: Path,
    make_track: TrackFactory,
) -> None:
    source = tmp_path / "old.mp3"
    media_file = _media_file(make_track, source, title="Song One", media_file_id=5)

    filesystem = mocker.MagicMock()
    filesystem.exists.side_effect = lambda path: path == source
    filesystem.ensure_parent.side_effect = PermissionError("read-only")
    executor = RenameExecutor(engine=engine, filesystem=filesystem, files=files)

    result = executor.rename_batch(PATTERN, [media_file])

    assert result.failed_count == 1
    assert "Failed to create directory" in result.errors[0]
    filesystem.move.assert_not_called()


def test_build_final_path() -> None:
    assert build_final_path("/music/artist/", "Album/01.mp3") == "/music/artist/Album/01.mp3"
    with pytest.raises(StorageRootNotFound):
        _ = build_final_path("   ", "Album/01.mp3")
    with pytest.raises(StorageRootNotFound):
        _ = build_final_path(None, "Album/01.mp3")


def test_commit_failure_is_reported_not_raised(
    tmp_path: Path,
    executor: RenameExecutor,
    files: MagicMock,
    make_track: TrackFactory,
) -> None:
    source = tmp_path / "old.mp3"
    _ = source.write_bytes(b"audio")
    media_file = _media_file(make_track, source, title="Song One", media_file_id=4)
    files.commit.side_effect = CommitFailed("database is locked")

    result = executor.rename_batch(PATTERN, [media_file])

    assert (tmp_path / "Test Artist" / "Song One.mp3").exists()
    assert result.success_count == 1
    assert result.commit_error == "Failed to save rename results: database is locked"
    assert result.errors == [result.commit_error]
    assert result.to_dict()["errors"] == [result.commit_error]
