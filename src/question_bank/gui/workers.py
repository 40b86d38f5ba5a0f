"""Background workers for the browser GUI."""
import logging
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import QObject, QThread, Signal

from question_bank.catalog.loading import LoaderError, load_records

logger = logging.getLogger(__name__)


class CatalogLoadWorker(QThread):
    """One-shot load of the record collection off the GUI thread.

    Emits exactly one of ``loaded(list)`` or ``failed(str)``.
    """
    loaded = Signal(list)
    failed = Signal(str)

    def __init__(
        self,
        source: Union[str, Path],
        timeout: float = 10.0,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.source = source
        self.timeout = timeout

    def run(self):
        try:
            records = load_records(self.source, timeout=self.timeout)
        except LoaderError as e:
            logger.error(f"Failed to load questions: {e}")
            self.failed.emit(str(e))
            return
        except Exception as e:
            logger.exception("Unexpected error while loading questions")
            self.failed.emit(str(e))
            return
        self.loaded.emit(records)
