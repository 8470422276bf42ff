import sys
import os
import logging
import traceback
from datetime import datetime
from PyQt5.QtWidgets import QApplication, QMessageBox

logger = logging.getLogger(__name__)

LOG_DIR = os.path.join(os.path.expanduser("~"), "pixelgrid_logs")
LOG_FILE = os.path.join(LOG_DIR, "pixelgrid.log")


def _write_report(exc_type, exc_value, exc_tb):
    os.makedirs(LOG_DIR, exist_ok=True)
    with open(LOG_FILE, "a", encoding="utf-8") as f:
        f.write(f"\n=== {datetime.now().isoformat()} ===\n")
        traceback.print_exception(exc_type, exc_value, exc_tb, file=f)


def _show_dialog(title, text, details=""):
    if QApplication.instance() is None:
        return
    msg = QMessageBox()
    msg.setIcon(QMessageBox.Critical)
    msg.setWindowTitle(title)
    msg.setText(text)
    if details:
        msg.setDetailedText(details)
    msg.exec_()


def _excepthook(exc_type, exc_value, exc_tb):
    """Write the traceback to a log file and show a user-friendly dialog."""
    _write_report(exc_type, exc_value, exc_tb)
    details = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
    try:
        _show_dialog(
            "Pixelgrid - Erreur",
            "Une erreur inattendue est survenue. "
            f"Un rapport a été enregistré dans:\n{LOG_FILE}",
            details,
        )
    except Exception:
        logger.exception("Could not display the error dialog")

    # Call the default hook to allow default handling (prints to stderr)
    sys.__excepthook__(exc_type, exc_value, exc_tb)


def install_excepthook():
    """Install global exception handler that logs uncaught exceptions."""
    sys.excepthook = _excepthook


def report_startup_failure(exc: BaseException):
    """Log a fatal startup error and tell the user nothing will be shown."""
    logger.critical("Startup aborted: %s", exc, exc_info=exc)
    _write_report(type(exc), exc, exc.__traceback__)
    _show_dialog(
        "Pixelgrid - Démarrage impossible",
        f"L'image n'a pas pu être créée :\n{exc}",
        "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
    )
