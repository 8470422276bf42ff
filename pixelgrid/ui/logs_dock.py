import logging

from PyQt5.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QPlainTextEdit,
    QComboBox,
    QPushButton,
)
from ..logger import log_emitter

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LogsWidget(QWidget):
    """Log viewer with a minimum-level filter and a clear button.

    Records arrive already formatted (``asctime - LEVEL - message``); the
    level is read back from the second field.
    """

    MAX_LINES = 2000

    def __init__(self, parent=None):
        super().__init__(parent)
        self.level_box = QComboBox(self)
        self.level_box.addItems(LEVELS)
        self.clear_btn = QPushButton("Effacer", self)

        self.text_edit = QPlainTextEdit(self)
        self.text_edit.setReadOnly(True)
        self.text_edit.setMaximumBlockCount(self.MAX_LINES)

        controls = QHBoxLayout()
        controls.addWidget(self.level_box, 1)
        controls.addWidget(self.clear_btn)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addLayout(controls)
        layout.addWidget(self.text_edit)

        self.clear_btn.clicked.connect(self.text_edit.clear)
        log_emitter.log_record.connect(self.append_record)

    def min_level(self) -> int:
        return logging.getLevelName(self.level_box.currentText())

    def append_record(self, msg: str):
        parts = msg.split(" - ", 2)
        level = logging.getLevelName(parts[1]) if len(parts) == 3 else None
        if isinstance(level, int) and level < self.min_level():
            return
        self.text_edit.appendPlainText(msg)
