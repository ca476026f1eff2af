"""Feature slices of the filenaming package."""
