# pixelgrid/__main__.py
import sys
import logging
from PyQt5.QtWidgets import QApplication

from pixelgrid.bug_report import install_excepthook, report_startup_failure
from pixelgrid.config import load_config
from pixelgrid.core import GridImage, ImageFactory
from pixelgrid.logger import setup_logging
from pixelgrid.ui.main_window import MainWindow

logger = logging.getLogger(__name__)


def main(image_factory: ImageFactory = GridImage):
    # Ensure uncaught exceptions are logged and reported
    install_excepthook()
    setup_logging()
    app = QApplication(sys.argv)
    config = load_config()

    # sans image, pas de grille partielle : on s'arrête
    try:
        image = image_factory(config.width, config.height)
    except Exception as exc:
        report_startup_failure(exc)
        sys.exit(1)
    logger.info("Created %sx%s grid", config.width, config.height)

    win = MainWindow(image, config)
    win.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
