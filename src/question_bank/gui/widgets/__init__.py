"""Widgets for the browser window."""
