"""Expose core UI widgets for convenient imports."""

from .main_window import MainWindow
from .toolbar import Toolbar
from .logs_dock import LogsWidget
from .debug_dialog import DebugDialog

__all__ = [
    "MainWindow",
    "Toolbar",
    "LogsWidget",
    "DebugDialog",
]
