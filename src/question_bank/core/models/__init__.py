"""Core data models."""

from .filters import ALL, BrowserState, FilterState
from .records import Difficulty, Record

__all__ = ["ALL", "BrowserState", "Difficulty", "FilterState", "Record"]
