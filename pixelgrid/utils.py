# pixelgrid/utils.py
"""
Conversions de couleurs entre triplets RGB, chaînes hex et QColor.
"""

import re

_HEX_RE = re.compile(r"[0-9a-fA-F]{6}")


def color_to_hex(color):
    """Convertit un triplet (r, g, b) en chaîne hex."""
    r, g, b = color[:3]
    return f"#{r:02X}{g:02X}{b:02X}"


def hex_to_color(value: str):
    """Convertit '#rrggbb' en triplet (r, g, b).

    Raises ValueError when the string is not a 6-digit hex color.
    """
    text = str(value).strip().lstrip("#")
    if not _HEX_RE.fullmatch(text):
        raise ValueError(f"not a #rrggbb color: {value!r}")
    return tuple(int(text[i:i + 2], 16) for i in (0, 2, 4))


def qcolor_to_rgb(qcolor):
    return (qcolor.red(), qcolor.green(), qcolor.blue())


def get_contrast_color(color):
    """Return '#000000' or '#ffffff' depending on brightness for
    readability."""
    r, g, b = color[:3]
    lum = 0.299 * r + 0.587 * g + 0.114 * b
    return "#000000" if lum > 186 else "#ffffff"
