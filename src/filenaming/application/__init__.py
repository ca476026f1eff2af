"""Application layer façades."""
