"""Question Bank Browser.

Subpackages:
- question_bank.core: record and filter-state models
- question_bank.catalog: loading, indexing, filtering, pagination
- question_bank.gui: PySide6 controller and window
"""
from importlib.metadata import PackageNotFoundError, version as _dist_version
from pathlib import Path
from typing import Optional

_DIST_NAME = "question-bank-browser"


def _version_from_pyproject(pyproject: Path) -> Optional[str]:
    try:
        lines = pyproject.read_text(encoding="utf-8").splitlines()
    except OSError:
        return None
    for line in lines:
        key, sep, value = line.partition("=")
        if sep and key.strip() == "version":
            return value.strip().strip("\"'")
    return None


def _get_version() -> str:
    """Installed distribution version, else the checkout's pyproject.toml."""
    try:
        return _dist_version(_DIST_NAME)
    except PackageNotFoundError:
        pass
    checkout = Path(__file__).resolve().parents[2] / "pyproject.toml"
    return _version_from_pyproject(checkout) or "0.0.0"


__version__ = _get_version()
__copyright__ = "Copyright 2026 Question Bank Browser contributors"
__all__: list[str] = ["__version__", "__copyright__"]
