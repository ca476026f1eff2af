"""
Summary: Derive the flat naming-variable mapping from a track and one of its files.
Why: Patterns only ever see strings, so every metadata quirk is normalized here.
"""

from __future__ import annotations

import re
from decimal import Decimal
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import ClassVar, Final, final

from filenaming.shared.library import Album, Artist, MediaFile, Medium, Track

LOSSLESS_FORMATS: Final[frozenset[str]] = frozenset({"flac", "alac"})

# Ordered: the first substring found in the lowercased quality wins.
QUALITY_SHORT_MAP: Final[tuple[tuple[str, str], ...]] = (
    ("flac", "FLAC"),
    ("lossless", "FLAC"),
    ("320", "320"),
    ("256", "256"),
    ("192", "192"),
    ("128", "128"),
    ("v0", "V0"),
    ("v2", "V2"),
)

FORMAT_SHORT_MAP: Final[dict[str, str]] = {
    "mp3": "MP3",
    "flac": "FLAC",
    "alac": "ALAC",
    "aac": "AAC",
    "ogg": "OGG",
    "wav": "WAV",
}

MEDIUM_FORMAT_MAP: Final[dict[str, str]] = {
    "cd": "CD",
    "vinyl": "Vinyl",
    "digital media": "Digital",
    "digital": "Digital",
    "cassette": "Cassette",
    "sacd": "SACD",
    "dvd": "DVD",
    "blu-ray": "Blu-ray",
}


@dataclass(frozen=True, slots=True)
class NamingDefaults:
    """Placeholders and fallbacks used when metadata is missing."""

    unknown_artist: str = "Unknown Artist"
    unknown_album: str = "Unknown Album"
    unknown_title: str = "Unknown Title"
    fallback_extension: str = "mp3"


@dataclass(frozen=True, slots=True)
class BitrateInfo:
    bitrate: str = ""
    bitrate_short: str = ""


@final
class VariableBuilder:
    """Build naming variables for a track.

    The resulting mapping always carries the same keys so that patterns can rely
    on them being present (missing metadata yields empty strings or defaults).
    """

    VINYL_TRACK: ClassVar[re.Pattern[str]] = re.compile(r"^([A-Z])(\d+)$")
    NUMERIC: ClassVar[re.Pattern[str]] = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)\s*$")
    QUALITY_UNSAFE: ClassVar[re.Pattern[str]] = re.compile(r"[^a-zA-Z0-9\s]")
    BADGE_UNSAFE: ClassVar[re.Pattern[str]] = re.compile(r"[^a-zA-Z0-9\s\-.]")
    WHITESPACE: ClassVar[re.Pattern[str]] = re.compile(r"\s+")
    LOSSLESS_KBPS: ClassVar[re.Pattern[str]] = re.compile(r"(\d+(?:\.\d+)?)\s*kbps", re.IGNORECASE)
    LOSSY_KBPS: ClassVar[re.Pattern[str]] = re.compile(r"(\d+)\s*kbps", re.IGNORECASE)

    def __init__(self, defaults: NamingDefaults | None = None) -> None:
        self.defaults = defaults or NamingDefaults()

    def build(self, track: Track, media_file: MediaFile | None = None) -> dict[str, str]:
        """Build the variable mapping for ``track``.

        Args:
            track: Track whose album, artist and medium feed the variables.
            media_file: File to describe; defaults to the track's first file.

        Returns:
            dict[str, str]: Variable name to rendered string value.
        """
        preferred = media_file if media_file is not None else track.first_file

        quality = self.normalize_quality(preferred.quality if preferred else None)
        file_format = self.normalize_format(preferred.format if preferred else None)
        badge = self.quality_badge(preferred.quality if preferred else None)
        bitrate = self.extract_bitrate(quality, file_format)

        album = track.album
        artist = album.artist if album else None
        medium = track.medium
        mediums_count = len(album.mediums) if album else 1

        return {
            "artist": (artist.name if artist else None) or self.defaults.unknown_artist,
            "artist_folder": self.artist_folder_name(artist),
            "album": (album.title if album else None) or self.defaults.unknown_album,
            "title": track.title or self.defaults.unknown_title,
            "trackNumber": self.format_track_number(track.track_number),
            "year": self.release_year(album),
            "extension": self.file_extension(preferred),
            "quality": quality,
            "quality_badge": badge,
            "quality_full": badge,
            "format": file_format,
            "quality_short": self.short_quality(quality),
            "format_short": self.short_format(file_format),
            "bitrate": bitrate.bitrate,
            "bitrate_short": bitrate.bitrate_short,
            "medium": medium.display_name if medium else "",
            "medium_short": self.short_medium_name(medium, mediums_count) if medium else "",
            "mediums_count": str(mediums_count),
        }

    @classmethod
    def format_track_number(cls, track_number: str | None) -> str:
        """Zero-pad track ordinals.

        ``A1`` -> ``A01``, ``7`` -> ``07``, ``3/12`` -> ``03``; anything else,
        including numbers too large to format, is returned unchanged.
        """
        if track_number is None:
            return ""

        vinyl = cls.VINYL_TRACK.match(track_number)
        if vinyl:
            padded = _pad_ordinal(vinyl.group(2))
            return f"{vinyl.group(1)}{padded}" if padded is not None else track_number

        if cls.NUMERIC.match(track_number):
            return _pad_ordinal(track_number) or track_number

        if "/" in track_number:
            parts = track_number.split("/")
            if len(parts) == 2 and cls.NUMERIC.match(parts[0]):
                return _pad_ordinal(parts[0]) or track_number

        return track_number

    @classmethod
    def normalize_quality(cls, quality: str | None) -> str:
        if not quality:
            return ""
        cleaned = cls.QUALITY_UNSAFE.sub("", quality)
        return cls.WHITESPACE.sub(" ", cleaned).strip()

    @classmethod
    def quality_badge(cls, quality: str | None) -> str:
        """Like :meth:`normalize_quality` but keeps ``-``/``.`` and marks other punctuation."""
        if not quality:
            return ""
        cleaned = cls.BADGE_UNSAFE.sub("_", quality)
        return cls.WHITESPACE.sub(" ", cleaned).strip()

    @staticmethod
    def normalize_format(file_format: str | None) -> str:
        return file_format.upper() if file_format else ""

    @classmethod
    def extract_bitrate(cls, quality: str, file_format: str) -> BitrateInfo:
        """Derive bitrate strings from the normalized quality and format.

        Lossless files (FLAC/ALAC format, or a quality mentioning flac/lossless)
        report their embedded kbps value when present, else ``Lossless`` with the
        uppercase format as short form. Lossy files report a plain kbps value.
        """
        if not quality:
            return BitrateInfo()

        quality_lower = quality.lower()
        format_lower = file_format.lower()

        if (
            format_lower in LOSSLESS_FORMATS
            or "flac" in quality_lower
            or "lossless" in quality_lower
        ):
            match = cls.LOSSLESS_KBPS.search(quality)
            if match:
                value = match.group(1)
                return BitrateInfo(bitrate=f"{value}kbps", bitrate_short=value.split(".")[0])
            return BitrateInfo(bitrate="Lossless", bitrate_short=format_lower.upper())

        match = cls.LOSSY_KBPS.search(quality)
        if match:
            return BitrateInfo(bitrate=f"{match.group(1)}kbps", bitrate_short=match.group(1))
        return BitrateInfo()

    @staticmethod
    def short_quality(quality: str) -> str:
        quality_lower = quality.lower()
        for needle, short in QUALITY_SHORT_MAP:
            if needle in quality_lower:
                return short
        return quality

    @staticmethod
    def short_format(file_format: str) -> str:
        return FORMAT_SHORT_MAP.get(file_format.lower(), file_format.upper())

    @staticmethod
    def short_medium_name(medium: Medium, mediums_count: int) -> str:
        """Return a compact medium label such as ``CD`` or ``Vinyl 2``.

        An explicit medium title always wins. Known formats map to canonical
        labels, and the position is appended for multi-medium albums.
        """
        if medium.title:
            return medium.title

        if medium.format:
            format_lower = medium.format.lower()
            short = MEDIUM_FORMAT_MAP.get(format_lower, format_lower[:1].upper() + format_lower[1:])
            if mediums_count > 1:
                return f"{short} {medium.position}"
            return short

        return "Medium" + (str(medium.position) if medium.position > 1 else "")

    @staticmethod
    def artist_folder_name(artist: Artist | None) -> str:
        if artist is None:
            return ""
        return artist.folder_name or artist.name or ""

    @staticmethod
    def release_year(album: Album | None) -> str:
        if album is None or album.release_date is None:
            return ""
        return f"{album.release_date.year:04d}"

    def file_extension(self, media_file: MediaFile | None) -> str:
        if media_file is None or not media_file.path:
            return self.defaults.fallback_extension
        return PurePosixPath(media_file.path).suffix.lstrip(".")


def _pad_ordinal(text: str) -> str | None:
    """Return ``text`` as an integer padded to two digits, or None if it cannot be formatted."""

    try:
        return f"{int(Decimal(text.strip())):02d}"
    except (ArithmeticError, ValueError):
        return None


__all__ = [
    "BitrateInfo",
    "FORMAT_SHORT_MAP",
    "MEDIUM_FORMAT_MAP",
    "NamingDefaults",
    "QUALITY_SHORT_MAP",
    "VariableBuilder",
]
