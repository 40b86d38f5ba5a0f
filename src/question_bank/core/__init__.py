"""Core models shared by the catalog engine and the GUI."""
