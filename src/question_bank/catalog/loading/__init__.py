"""Catalog loading: JSON document fetch and record parsing."""

from .loader import LoaderError, load_records, parse_records, read_catalog_document
from .parser import ParseError, parse_record

__all__ = [
    "LoaderError",
    "ParseError",
    "load_records",
    "parse_record",
    "parse_records",
    "read_catalog_document",
]
