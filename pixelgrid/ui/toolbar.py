from PyQt5.QtWidgets import QToolBar, QAction, QColorDialog
from PyQt5.QtGui import QColor, QPixmap, QIcon

from ..session import PRESETS
from ..utils import qcolor_to_rgb

PRESET_LABELS = {
    "red": "Rouge",
    "green": "Vert",
    "blue": "Bleu",
}


def _swatch(color) -> QIcon:
    pix = QPixmap(16, 16)
    pix.fill(QColor(*color))
    return QIcon(pix)


class Toolbar(QToolBar):
    """Palette : une action par couleur prédéfinie, plus un sélecteur libre."""

    def __init__(self, parent):
        super().__init__("Palette", parent)
        self.canvas = parent.canvas
        self.preset_actions = {}

        for name, color in PRESETS.items():
            act = QAction(_swatch(color), PRESET_LABELS[name], self)
            act.setObjectName(name)
            act.triggered.connect(lambda _=False, c=color: self.set_color(c))
            self.addAction(act)
            self.preset_actions[name] = act

        self.addSeparator()

        # Palette de couleurs
        color_act = QAction("Couleur...", self)
        color_act.triggered.connect(self.choose_color)
        self.addAction(color_act)

    def set_color(self, color):
        self.canvas.select_color(color)
        self.parent().on_color_selected(self.canvas.current_color)

    def choose_color(self):
        """Ouvre une palette, récupère la couleur et la passe au canvas."""
        color = QColorDialog.getColor(
            QColor(*self.canvas.current_color), self.parent(), "Choisir une couleur"
        )
        if color.isValid():
            self.set_color(qcolor_to_rgb(color))
