"""Tests for CLI rich displays."""

from __future__ import annotations

from io import StringIO

from rich.console import Console

from filenaming.application.services.rename_service import RenameStatusCounts
from filenaming.features.renaming import (
    BatchRenameResult,
    RenameAnalysis,
    RenameItemResult,
    RenamePreview,
    RenameReason,
)
from filenaming.ui.cli.display import PreviewDisplay, RenameResultDisplay, StatusDisplay


def _console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, width=200, color_system=None), buffer


def test_preview_table_lists_new_names() -> None:
    console, buffer = _console()
    preview = RenamePreview(
        id=4,
        current_name="old [live].mp3",
        new_name="01 - Song.mp3",
        new_full_path="/x/Artist/01 - Song.mp3",
        artist="Artist",
        album="Album",
        title="Song",
        track_number="1",
        quality="320 kbps",
        format="mp3",
    )

    PreviewDisplay(console).show_previews([preview])

    output = buffer.getvalue()
    assert "old [live].mp3" in output
    assert "01 - Song.mp3" in output
    assert "1 file(s) would be renamed" in output


def test_preview_quiet_and_empty() -> None:
    console, buffer = _console()
    display = PreviewDisplay(console)

    display.show_previews([], quiet=True)
    assert buffer.getvalue() == ""

    display.show_previews([])
    assert "already match" in buffer.getvalue()


def test_result_summary_caps_errors() -> None:
    console, buffer = _console()
    result = BatchRenameResult(
        items=[
            RenameItemResult(media_file_id=1, success=True, source="/x/a.mp3", destination="/x/b.mp3"),
            *[
                RenameItemResult(media_file_id=index, success=False, error=f"MediaFile {index}: boom")
                for index in range(2, 7)
            ],
        ]
    )

    RenameResultDisplay(console).show_result(result)

    output = buffer.getvalue()
    assert "Renamed: 1" in output
    assert "/x/a.mp3 → /x/b.mp3" in output
    assert "Failed: 5" in output
    assert "MediaFile 4: boom" in output
    assert "MediaFile 5: boom" not in output
    assert "and 2 more..." in output


def test_result_summary_reports_unsaved_batch() -> None:
    console, buffer = _console()
    result = BatchRenameResult(
        items=[RenameItemResult(media_file_id=1, success=True, source="/x/a.mp3", destination="/x/b.mp3")],
        commit_error="Failed to save rename results: disk I/O error",
    )

    RenameResultDisplay(console).show_result(result)

    assert "Not saved: Failed to save rename results: disk I/O error" in buffer.getvalue()


def test_status_counts_and_analysis() -> None:
    console, buffer = _console()
    display = StatusDisplay(console)

    display.show_counts(RenameStatusCounts(needing_rename=2, not_needing_rename=5), updated=7)
    display.show_analysis(
        RenameAnalysis(
            needs_rename=True,
            reason=RenameReason.PATH_CHANGE_NEEDED,
            current_path="/x/a.mp3",
            expected_path="/x/b/a.mp3",
            filename_correct=True,
        )
    )

    output = buffer.getvalue()
    assert "Total files: 7" in output
    assert "Needing rename: 2" in output
    assert "path_change_needed" in output
    assert "/x/b/a.mp3" in output
