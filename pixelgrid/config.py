# pixelgrid/config.py

import logging
from dataclasses import dataclass
from typing import Tuple

from .session import DEFAULT_CELL_SIZE, DEFAULT_COLOR
from .utils import color_to_hex, hex_to_color

logger = logging.getLogger(__name__)

ORGANIZATION = "pixelgrid"
APPLICATION = "pixelgrid"


@dataclass
class GridConfig:
    width: int = 10
    height: int = 10
    cell_size: int = DEFAULT_CELL_SIZE
    color: Tuple[int, int, int] = DEFAULT_COLOR


def _settings(settings=None):
    if settings is None:
        from PyQt5.QtCore import QSettings

        settings = QSettings(ORGANIZATION, APPLICATION)
    return settings


def _read_size(settings, key: str, default: int) -> int:
    raw = settings.value(key, default)
    try:
        return max(1, int(raw))
    except (TypeError, ValueError):
        logger.warning("Invalid %s=%r in settings, using %s", key, raw, default)
        return default


def load_config(settings=None) -> GridConfig:
    """Lit la configuration depuis QSettings, valeurs par défaut sinon."""
    settings = _settings(settings)
    defaults = GridConfig()
    raw_color = settings.value("color", color_to_hex(defaults.color))
    try:
        color = hex_to_color(raw_color)
    except ValueError:
        logger.warning("Invalid color=%r in settings, using default", raw_color)
        color = defaults.color
    config = GridConfig(
        width=_read_size(settings, "grid_width", defaults.width),
        height=_read_size(settings, "grid_height", defaults.height),
        cell_size=_read_size(settings, "cell_size", defaults.cell_size),
        color=color,
    )
    logger.debug("Loaded %s", config)
    return config


def save_config(config: GridConfig, settings=None):
    settings = _settings(settings)
    settings.setValue("grid_width", config.width)
    settings.setValue("grid_height", config.height)
    settings.setValue("cell_size", config.cell_size)
    settings.setValue("color", color_to_hex(config.color))
