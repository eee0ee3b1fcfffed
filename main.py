"""Application entry point for the temple queue dashboard."""

import sys

from PyQt6.QtWidgets import QApplication

from temple.config import get_settings
from temple.logging_config import setup_logging
from temple.seed import load_services
from temple.store import ServiceStore
from ui.main_window import MainWindow


def main():
    settings = get_settings()
    setup_logging(settings.log_level)

    app = QApplication(sys.argv)
    store = ServiceStore(load_services(settings.seed_file), history_limit=settings.history_limit)
    window = MainWindow(store, settings)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
