"""Adapters binding renaming ports to SQLite and the local filesystem."""
