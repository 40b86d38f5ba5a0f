"""
Catalog engine: loading, indexing, filtering, pagination and random pick.

Nothing in this package depends on Qt.
"""

from .config import BrowserConfig
from .filtering import filter_records, matches
from .index import RecordStore, distinct_subtopics, distinct_topics
from .loading import LoaderError, ParseError, load_records
from .pagination import Paginator
from .selection import pick_random

__all__ = [
    "BrowserConfig",
    "LoaderError",
    "Paginator",
    "ParseError",
    "RecordStore",
    "distinct_subtopics",
    "distinct_topics",
    "filter_records",
    "load_records",
    "matches",
    "pick_random",
]
