"""Data access for persisted entities."""
