# Where: filenaming.shared.__init__
# What: Provide a concise import surface for shared dataclasses.
# Why: Encourage consistent reuse of the library model across features.

"""Shared cross-cutting dataclasses exposed at the package level."""

from .library import Album, Artist, MediaFile, Medium, NamingPattern, StorageRoot, Track

__all__ = [
    "Album",
    "Artist",
    "MediaFile",
    "Medium",
    "NamingPattern",
    "StorageRoot",
    "Track",
]
