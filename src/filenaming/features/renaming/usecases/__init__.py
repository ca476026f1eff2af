"""Renaming use cases."""
