"""
Module: catalog.config

Purpose:
    Configuration dataclass for the browser. Immutable configuration
    with validation on construction.

Key Classes:
    - BrowserConfig: Data source, page size and search debounce

Used By:
    - gui.app: Startup
    - gui.controller: Page size and debounce interval
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from question_bank.catalog.pagination import DEFAULT_PAGE_SIZE

SOURCE_ENV_VAR = "QUESTION_BANK_SOURCE"
DEFAULT_DEBOUNCE_MS = 300


@dataclass(frozen=True)
class BrowserConfig:
    """
    Configuration for the browser (immutable).

    Attributes:
        source: Local path or http(s) URL of the catalog JSON document
        page_size: Records revealed per "load more"
        search_debounce_ms: Quiet period before a search is applied
        request_timeout: Timeout in seconds for remote catalogs

    Example:
        >>> config = BrowserConfig(source="data/questions.json")
        >>> config.page_size
        12
    """

    source: Union[str, Path]
    page_size: int = DEFAULT_PAGE_SIZE
    search_debounce_ms: int = DEFAULT_DEBOUNCE_MS
    request_timeout: float = 10.0

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not str(self.source):
            raise ValueError("source must be non-empty")
        if self.page_size <= 0:
            raise ValueError(f"page_size must be positive: {self.page_size}")
        if self.search_debounce_ms < 0:
            raise ValueError(f"search_debounce_ms must be non-negative: {self.search_debounce_ms}")
        if self.request_timeout <= 0:
            raise ValueError(f"request_timeout must be positive: {self.request_timeout}")

    @classmethod
    def from_environment(cls, default_source: Union[str, Path], source: Optional[str] = None) -> "BrowserConfig":
        """Build a config, preferring an explicit source, then the environment."""
        chosen = source or os.environ.get(SOURCE_ENV_VAR) or default_source
        return cls(source=chosen)
