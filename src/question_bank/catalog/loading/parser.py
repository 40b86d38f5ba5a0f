"""
Module: catalog.loading.parser

Purpose:
    Parse and validate individual record objects from the catalog JSON
    document into Record instances.

Key Functions:
    - parse_record(): Parse one JSON object into a Record

Key Classes:
    - ParseError: Exception for malformed record objects

Used By:
    - catalog.loading.loader: Catalog loading
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from question_bank.core.models import Difficulty, Record

logger = logging.getLogger(__name__)

REQUIRED_TEXT_FIELDS = ("id", "topic", "subtopic", "question_text", "solution_text")


class ParseError(Exception):
    """Error parsing a record object."""
    pass


def parse_record(data: Any, *, source: str = "<catalog>") -> Record:
    """
    Parse a single record object.

    Validates:
    - Object is a JSON object
    - Required text fields present and strings
    - Difficulty is a known level
    - Tags and image lists are lists of strings

    Args:
        data: Decoded JSON value for one record
        source: Label used in error messages

    Returns:
        Record object

    Raises:
        ParseError: If the object is malformed

    Example:
        >>> parse_record({"id": "1", "topic": "Algebra", "subtopic": "Linear",
        ...               "difficulty": "easy", "question_text": "Q",
        ...               "solution_text": "A", "tags": ["intro"]})
        Record(id='1', ...)
    """
    if not isinstance(data, dict):
        raise ParseError(f"{source}: expected object, got {type(data).__name__}")

    for key in REQUIRED_TEXT_FIELDS:
        if key not in data:
            raise ParseError(f"{source}: missing required field '{key}'")
        if not isinstance(data[key], str):
            raise ParseError(f"{source}: field '{key}' must be a string")

    record_id = data["id"].strip()
    if not record_id:
        raise ParseError(f"{source}: field 'id' must be non-empty")

    raw_difficulty = data.get("difficulty")
    try:
        difficulty = Difficulty(str(raw_difficulty).lower())
    except ValueError:
        raise ParseError(
            f"{source}: unknown difficulty {raw_difficulty!r} "
            f"(expected one of {', '.join(Difficulty.values())})"
        ) from None

    tags = _string_tuple(data, "tags", source)
    if len(set(tags)) != len(tags):
        logger.debug(f"{source}: dropping duplicate tags")
        tags = tuple(dict.fromkeys(tags))

    try:
        return Record(
            id=record_id,
            topic=data["topic"],
            subtopic=data["subtopic"],
            difficulty=difficulty,
            question_text=data["question_text"],
            solution_text=data["solution_text"],
            tags=tags,
            question_images=_string_tuple(data, "question_images", source),
            solution_images=_string_tuple(data, "solution_images", source),
            solution_video_url=_optional_string(data, "solution_video_url", source),
        )
    except ValueError as e:
        raise ParseError(f"{source}: {e}") from e


def _string_tuple(data: Dict[str, Any], key: str, source: str) -> Tuple[str, ...]:
    """Read an optional list of strings; missing or null becomes ()."""
    value = data.get(key)
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ParseError(f"{source}: field '{key}' must be a list of strings")
    return tuple(value)


def _optional_string(data: Dict[str, Any], key: str, source: str) -> Optional[str]:
    value = data.get(key)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ParseError(f"{source}: field '{key}' must be a string")
    return value
