"""
Preference persistence for the browser.

Saves the persisted subset of browser state (filter selections, favorites,
dark mode) into a key-value store under fixed keys and restores it on
startup. Any malformed data falls back to defaults for that key only and
never aborts startup.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

from question_bank.core.models import ALL, BrowserState, FilterState

logger = logging.getLogger(__name__)

# Stable across versions; shared with the original web browser's localStorage
FILTERS_KEY = "qb_filters"
FAVORITES_KEY = "qb_favorites"
DARK_MODE_KEY = "qb_darkmode"


class KeyValueStore(Protocol):
    """Get/set of opaque string blobs."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """Dict-backed store for tests and headless use."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileStore:
    """
    JSON-file-backed store.

    The whole file is one JSON object mapping keys to string blobs. A
    missing or corrupt file starts empty.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self.data: Dict[str, str] = {}

        if self.path.exists():
            try:
                raw = json.loads(self.path.read_text(encoding="utf-8"))
            except json.JSONDecodeError as e:
                logger.warning(f"Preferences file is corrupted, starting fresh: {e}")
                raw = {}
            except Exception as e:
                logger.warning(f"Failed to read preferences: {e}")
                raw = {}
            if isinstance(raw, dict):
                self.data = {str(k): v for k, v in raw.items() if isinstance(v, str)}
            else:
                logger.warning("Preferences file is not a JSON object, starting fresh")

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value
        self._save()

    def _save(self) -> None:
        """Safely write preferences with atomic replacement.

        Uses a temp file to prevent corruption if write is interrupted.
        """
        temp_path = self.path.with_suffix(".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(json.dumps(self.data, indent=2), encoding="utf-8")
            temp_path.replace(self.path)
        except OSError as e:
            logger.warning(f"Failed to save preferences: {e}")
            try:
                if temp_path.exists():
                    temp_path.unlink()
            except OSError:
                pass


class PreferenceStore:
    """
    Round-trips BrowserState through a KeyValueStore.

    The search term is never persisted. ``load(save(S))`` restores every
    other field of S.

    Example:
        >>> prefs = PreferenceStore(MemoryStore())
        >>> prefs.save(state)
        >>> prefs.load().filters.topic
        'Algebra'
    """

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    def save(self, state: BrowserState) -> None:
        filters = state.filters
        payload = {
            "topic": filters.topic,
            "subtopic": filters.subtopic,
            "difficulty": filters.difficulty,
            "tags": sorted(filters.tags),
            "favoritesOnly": filters.favorites_only,
        }
        self.store.set(FILTERS_KEY, json.dumps(payload))
        self.store.set(FAVORITES_KEY, json.dumps(sorted(state.favorites)))
        self.store.set(DARK_MODE_KEY, "true" if state.dark_mode else "false")

    def load(self) -> BrowserState:
        """Restore state; each key independently falls back to defaults."""
        return BrowserState(
            filters=self._load_filters(),
            favorites=self._load_favorites(),
            dark_mode=self.store.get(DARK_MODE_KEY) == "true",
        )

    def _load_json(self, key: str) -> Any:
        raw = self.store.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (json.JSONDecodeError, TypeError) as e:
            logger.warning(f"Ignoring corrupt preference {key!r}: {e}")
            return None

    def _load_favorites(self) -> set[str]:
        raw = self._load_json(FAVORITES_KEY)
        if raw is None:
            return set()
        if not isinstance(raw, list):
            logger.warning(f"Ignoring preference {FAVORITES_KEY!r}: expected a list")
            return set()
        return {entry for entry in raw if isinstance(entry, str)}

    def _load_filters(self) -> FilterState:
        state = FilterState()
        raw = self._load_json(FILTERS_KEY)
        if raw is None:
            return state
        if not isinstance(raw, dict):
            logger.warning(f"Ignoring preference {FILTERS_KEY!r}: expected an object")
            return state

        state.topic = _selector(raw.get("topic"))
        state.subtopic = _selector(raw.get("subtopic"))
        state.difficulty = _selector(raw.get("difficulty"))
        tags = raw.get("tags")
        if isinstance(tags, list):
            state.tags = {tag for tag in tags if isinstance(tag, str)}
        state.favorites_only = raw.get("favoritesOnly") is True
        return state


def _selector(value: Any) -> str:
    return value if isinstance(value, str) and value else ALL
