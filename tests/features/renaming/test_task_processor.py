"""
Summary: Tests for the deferred rename task processor and its summary message.
Why: Task runners rely on a result object whatever happens inside the batch.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from filenaming.features.renaming import (
    BatchRenameResult,
    RenameFilesTaskProcessor,
    RenameItemResult,
    format_summary,
)
from filenaming.shared.library import MediaFile, NamingPattern


@pytest.fixture
def collaborators(mocker: MockerFixture) -> tuple[MagicMock, MagicMock, MagicMock]:
    patterns = mocker.MagicMock()
    patterns.get_pattern.return_value = NamingPattern("{{title}}.{{extension}}", id=5)
    files = mocker.MagicMock()
    files.get_media_files.return_value = [MediaFile(path="/x/a.mp3", id=1), MediaFile(path="/x/b.mp3", id=2)]
    executor = mocker.MagicMock()
    return patterns, files, executor


def _processor(collaborators: tuple[MagicMock, MagicMock, MagicMock]) -> RenameFilesTaskProcessor:
    patterns, files, executor = collaborators
    return RenameFilesTaskProcessor(patterns=patterns, files=files, executor=executor)


def test_supports_rename_files_only(collaborators: tuple[MagicMock, MagicMock, MagicMock]) -> None:
    processor = _processor(collaborators)

    assert processor.supports("rename_files")
    assert not processor.supports("refresh_status")


@pytest.mark.parametrize(
    "metadata",
    [None, {}, {"pattern_id": 5}, {"media_file_ids": [1]}, {"pattern_id": 5, "media_file_ids": []}],
)
def test_missing_metadata_fails(
    collaborators: tuple[MagicMock, MagicMock, MagicMock], metadata: dict[str, object] | None
) -> None:
    result = _processor(collaborators).process(metadata)

    assert result.success is False
    assert result.message == "Missing pattern ID or media file IDs"


@pytest.mark.parametrize("ids", ["12", b"12", 12, {"id": 1}])
def test_non_list_file_ids_fail(
    collaborators: tuple[MagicMock, MagicMock, MagicMock], ids: object
) -> None:
    _, files, executor = collaborators

    result = _processor(collaborators).process({"pattern_id": 5, "media_file_ids": ids})

    assert result.success is False
    assert result.message == "Media file IDs must be a list"
    files.get_media_files.assert_not_called()
    executor.rename_batch.assert_not_called()


def test_unknown_pattern_fails(collaborators: tuple[MagicMock, MagicMock, MagicMock]) -> None:
    patterns, _, executor = collaborators
    patterns.get_pattern.return_value = None

    result = _processor(collaborators).process({"pattern_id": 9, "media_file_ids": [1]})

    assert result.success is False
    assert result.message == "Naming pattern with ID 9 not found"
    executor.rename_batch.assert_not_called()


def test_process_reports_batch_outcome(collaborators: tuple[MagicMock, MagicMock, MagicMock]) -> None:
    _, files, executor = collaborators
    executor.rename_batch.return_value = BatchRenameResult(
        items=[
            RenameItemResult(media_file_id=1, success=True, source="/x/a.mp3", destination="/x/A.mp3"),
            RenameItemResult(
                media_file_id=2,
                success=False,
                source="/x/b.mp3",
                error="MediaFile 2: Source file not found: /x/b.mp3",
            ),
        ]
    )

    result = _processor(collaborators).process({"pattern_id": "5", "track_file_ids": [1, 2]})

    assert result.success is True
    assert result.message == (
        "File renaming completed: 1 successful, 1 failed | Files: /x/a.mp3 → /x/A.mp3"
        " (Errors: MediaFile 2: Source file not found: /x/b.mp3)"
    )
    assert result.data == {
        "patternId": 5,
        "totalFiles": 2,
        "successCount": 1,
        "failedCount": 1,
        "errorsCount": 1,
        "errors": ["MediaFile 2: Source file not found: /x/b.mp3"],
        "renamedFiles": [{"from": "/x/a.mp3", "to": "/x/A.mp3"}],
    }
    assert list(files.get_media_files.call_args.args[0]) == [1, 2]


def test_summary_caps_listed_errors() -> None:
    result = BatchRenameResult(
        items=[
            RenameItemResult(media_file_id=index, success=False, error=f"MediaFile {index}: boom")
            for index in range(1, 6)
        ]
    )

    assert format_summary(result) == (
        "File renaming completed: 0 successful, 5 failed"
        " (Errors: MediaFile 1: boom; MediaFile 2: boom; MediaFile 3: boom) and 2 more..."
    )
