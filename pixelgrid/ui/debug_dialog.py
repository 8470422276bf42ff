from typing import Callable

from PyQt5.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QPlainTextEdit,
    QDialogButtonBox,
    QApplication,
)
from PyQt5.QtCore import Qt


class DebugDialog(QDialog):
    """Session state report, refreshable while the canvas keeps running."""

    def __init__(self, report_provider: Callable[[], str], parent=None):
        super().__init__(parent)
        self.setWindowTitle("Debug")
        self.resize(420, 260)
        self._report_provider = report_provider

        layout = QVBoxLayout(self)
        self.report_view = QPlainTextEdit(self)
        self.report_view.setReadOnly(True)
        layout.addWidget(self.report_view)

        buttons = QDialogButtonBox(QDialogButtonBox.Close, Qt.Horizontal, self)
        self.refresh_btn = buttons.addButton("Rafraîchir", QDialogButtonBox.ActionRole)
        self.refresh_btn.clicked.connect(self.refresh)
        self.copy_btn = buttons.addButton("Copier", QDialogButtonBox.ActionRole)
        self.copy_btn.clicked.connect(self.copy_report)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

        self.refresh()

    def refresh(self):
        self.report_view.setPlainText(self._report_provider())

    def copy_report(self):
        QApplication.clipboard().setText(self.report_view.toPlainText())
