"""filenaming: rename media files to the paths a naming pattern renders."""

__version__ = "0.1.0"
