"""Rename domain values and errors."""
