import logging
import sys

from PySide6.QtWidgets import QApplication
from easel.ui.ui import MainWindow
from easel.core.app import App
from easel.core.logging_config import LoggingConfig
from easel.core.services.document_service import DocumentService


logger = logging.getLogger(__name__)


def main():
    LoggingConfig.setup_logging()
    log_file = LoggingConfig.get_log_file_path()
    if log_file is not None:
        logger.info("Writing log to %s", log_file)
    q_app = QApplication(sys.argv)
    app = App(document_service=DocumentService())
    window = MainWindow(app)
    app.main_window = window
    window.show()
    return q_app.exec()


if __name__ == "__main__":
    sys.exit(main())
