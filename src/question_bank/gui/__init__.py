"""PySide6 front end: controller, window and supporting utilities."""
