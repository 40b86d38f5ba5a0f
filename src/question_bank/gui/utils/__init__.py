"""GUI utilities."""
