"""Data access objects for the library tables."""
