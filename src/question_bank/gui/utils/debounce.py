"""Debounced calls on the Qt event loop.

Each new call supersedes the pending one: the timer restarts and only the
latest arguments are delivered when it fires.
"""
from __future__ import annotations

from typing import Any, Callable, Optional, Tuple

from PySide6.QtCore import QObject, QTimer


class Debouncer(QObject):
    """Collapse rapid successive calls into one, using the latest arguments.

    Usage:
        debouncer = Debouncer(300, self._apply_search)
        line_edit.textChanged.connect(debouncer.call)
    """

    def __init__(
        self,
        interval_ms: int,
        callback: Callable[..., Any],
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._callback = callback
        self._pending: Optional[Tuple[Any, ...]] = None
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._fire)

    @property
    def interval(self) -> int:
        return self._timer.interval()

    def call(self, *args: Any) -> None:
        """Schedule the callback, cancelling any pending call."""
        self._pending = args
        self._timer.start()  # restarts if already active

    def cancel(self) -> None:
        self._timer.stop()
        self._pending = None

    def flush(self) -> None:
        """Run the pending call now, if any."""
        if self._pending is not None:
            self._timer.stop()
            self._fire()

    def is_pending(self) -> bool:
        return self._pending is not None

    def _fire(self) -> None:
        args, self._pending = self._pending, None
        if args is not None:
            self._callback(*args)
