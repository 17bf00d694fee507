"""Adapters connecting cvd to the outside world."""
