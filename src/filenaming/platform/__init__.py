"""Infrastructure shared by features: logging, filesystem and database access."""
