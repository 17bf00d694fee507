"""Domain layer for device selection."""
