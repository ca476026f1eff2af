"""Naming use cases."""
