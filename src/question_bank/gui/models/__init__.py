"""GUI-side models."""
