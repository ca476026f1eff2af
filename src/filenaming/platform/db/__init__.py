"""SQLite database manager and data access objects."""
