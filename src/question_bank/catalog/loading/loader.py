"""
Module: catalog.loading.loader

Purpose:
    Load the record collection from a JSON document, either a local file
    or an http(s) URL. This is the one-shot data source that gates every
    other operation of the browser.

Key Functions:
    - load_records(): Load and parse the full collection
    - read_catalog_document(): Fetch and decode the raw JSON document
    - parse_records(): Parse a decoded JSON array into records

Key Classes:
    - LoaderError: Fatal load failure

Dependencies:
    - httpx: Remote catalog fetch
    - catalog.loading.parser: Per-record parsing

Used By:
    - gui.workers: Background load
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Union

import httpx

from question_bank.core.models import Record

from .parser import ParseError, parse_record

logger = logging.getLogger(__name__)


class LoaderError(Exception):
    """Error loading the record collection. Always fatal."""
    pass


def _is_url(source: Union[str, Path]) -> bool:
    return isinstance(source, str) and source.lower().startswith(("http://", "https://"))


def read_catalog_document(source: Union[str, Path], *, timeout: float = 10.0) -> Any:
    """
    Fetch and decode the catalog JSON document.

    Args:
        source: Local path or http(s) URL
        timeout: Request timeout in seconds (URLs only)

    Returns:
        Decoded JSON value

    Raises:
        LoaderError: On non-success status, transport error, unreadable or
            undecodable file, or invalid JSON
    """
    if _is_url(source):
        try:
            response = httpx.get(str(source), timeout=timeout, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise LoaderError(f"HTTP error! Status: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise LoaderError(f"Failed to fetch {source}: {e}") from e
        text = response.text
    else:
        path = Path(source)
        if not path.exists():
            raise LoaderError(f"Catalog file does not exist: {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise LoaderError(f"Catalog is not valid UTF-8 text: {e}") from e
        except OSError as e:
            raise LoaderError(f"Failed to read {path}: {e}") from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise LoaderError(f"Catalog is not valid JSON: {e}") from e


def parse_records(document: Any) -> List[Record]:
    """
    Parse a decoded catalog document into records.

    Malformed entries are skipped with a warning, as are later entries
    reusing an id already seen. Source order is preserved.

    Raises:
        LoaderError: If the document is not a JSON array
    """
    if not isinstance(document, list):
        raise LoaderError(
            f"Catalog must be a JSON array of records, got {type(document).__name__}"
        )

    records: List[Record] = []
    seen: set[str] = set()
    for position, entry in enumerate(document):
        try:
            record = parse_record(entry, source=f"record[{position}]")
        except ParseError as e:
            logger.warning(f"Skipping malformed record: {e}")
            continue
        if record.id in seen:
            logger.warning(f"Skipping duplicate record id {record.id!r} at position {position}")
            continue
        seen.add(record.id)
        records.append(record)

    if len(records) < len(document):
        logger.warning(f"Skipped {len(document) - len(records)} of {len(document)} catalog entries")
    return records


def load_records(source: Union[str, Path], *, timeout: float = 10.0) -> List[Record]:
    """
    Load all records from a catalog source.

    Args:
        source: Local path or http(s) URL of the JSON document
        timeout: Request timeout in seconds (URLs only)

    Returns:
        Records in document order

    Raises:
        LoaderError: If the collection is unavailable

    Example:
        >>> records = load_records(Path("data/questions.json"))
        >>> len(records)
        120
    """
    logger.info(f"Loading questions from {source}")
    records = parse_records(read_catalog_document(source, timeout=timeout))
    logger.info(f"Loaded {len(records)} questions")
    return records
