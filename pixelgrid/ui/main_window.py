# pixelgrid/ui/main_window.py
import logging
from PyQt5.QtWidgets import (
    QMainWindow,
    QDockWidget,
    QLabel,
    QAction,
)
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QKeySequence

from ..canvas import GridCanvas
from ..config import GridConfig, save_config
from ..core import GridImageStore
from ..utils import color_to_hex, get_contrast_color
from .toolbar import Toolbar
from .logs_dock import LogsWidget
from .debug_dialog import DebugDialog

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, image: GridImageStore, config: GridConfig, settings=None):
        super().__init__()
        logger.debug("MainWindow initialized")
        self.setWindowTitle("Pixelgrid")
        self.config = config
        self._settings = settings

        self.canvas = GridCanvas(image, config.cell_size, config.color, self)
        self.setCentralWidget(self.canvas)

        self.toolbar = Toolbar(self)
        self.addToolBar(Qt.TopToolBarArea, self.toolbar)

        self.logs = LogsWidget(self)
        self.logs_dock = QDockWidget("Logs", self)
        self.logs_dock.setObjectName("logs_dock")
        self.logs_dock.setWidget(self.logs)
        self.addDockWidget(Qt.BottomDockWidgetArea, self.logs_dock)
        self.logs_dock.hide()

        self.color_label = QLabel(self)
        self.statusBar().addPermanentWidget(self.color_label)
        self._update_color_label(self.canvas.current_color)

        self._create_menus()

    def _create_menus(self):
        view_menu = self.menuBar().addMenu("Affichage")
        view_menu.addAction(self.logs_dock.toggleViewAction())

        debug_act = QAction("Debug...", self)
        debug_act.setShortcut(QKeySequence("F12"))
        debug_act.triggered.connect(self.show_debug_dialog)
        view_menu.addAction(debug_act)

        quit_act = QAction("Quitter", self)
        quit_act.setShortcut(QKeySequence.Quit)
        quit_act.triggered.connect(self.close)
        view_menu.addAction(quit_act)

    def show_debug_dialog(self):
        DebugDialog(self.canvas.get_debug_report, self).exec_()

    def on_color_selected(self, color):
        self._update_color_label(color)
        # la prochaine session démarre avec cette couleur
        self.config.color = tuple(color)
        save_config(self.config, self._settings)

    def _update_color_label(self, color):
        hex_color = color_to_hex(color)
        self.color_label.setText(f" {hex_color} ")
        self.color_label.setStyleSheet(
            f"background: {hex_color}; color: {get_contrast_color(color)};"
        )
