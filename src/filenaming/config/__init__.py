"""Configuration loading, portable paths and derived settings."""
