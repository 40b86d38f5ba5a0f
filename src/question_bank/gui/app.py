"""
Entry point for the PySide6 browser.

Startup order: logging, preferences, controller, window, then the one-shot
background load of the catalog. Nothing is browsable until the load
finishes; a failed load leaves the window in its error state.
"""
import logging
import sys
from typing import List, Optional


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def run(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the GUI application.

    Args:
        argv: Command-line arguments; the first positional argument, if
            any, is the catalog source (path or URL)
    """
    argv = list(sys.argv if argv is None else argv)
    configure_logging()

    from PySide6.QtWidgets import QApplication

    from question_bank import __version__
    from question_bank.catalog.config import BrowserConfig
    from question_bank.gui.controller import BrowserController
    from question_bank.gui.models.preferences import JsonFileStore, PreferenceStore
    from question_bank.gui.styles.theme import apply_theme
    from question_bank.gui.utils.paths import get_default_catalog_path, get_preferences_path
    from question_bank.gui.widgets.browser_window import BrowserWindow
    from question_bank.gui.workers import CatalogLoadWorker

    logger = logging.getLogger(__name__)

    app = QApplication(argv)
    app.setApplicationName("Question Bank")
    app.setApplicationDisplayName("Question Bank")
    app.setOrganizationName("Question Bank")

    source = argv[1] if len(argv) > 1 else None
    config = BrowserConfig.from_environment(get_default_catalog_path(), source)
    logger.info(f"Question Bank {__version__} starting with source {config.source}")

    preferences = PreferenceStore(JsonFileStore(get_preferences_path()))
    controller = BrowserController(
        preferences,
        page_size=config.page_size,
        search_debounce_ms=config.search_debounce_ms,
    )
    apply_theme(app, controller.dark_mode)

    window = BrowserWindow(controller)
    worker = CatalogLoadWorker(config.source, timeout=config.request_timeout, parent=window)
    worker.loaded.connect(window.show_records)
    worker.failed.connect(window.show_load_error)

    window.show()
    worker.start()

    exit_code = app.exec()
    worker.wait()
    return exit_code


if __name__ == "__main__":
    sys.exit(run())
