from .color import ColorDecodeError, StyleColor
from .colorspace import (
    ColorSpace,
    ColorSpaceResolver,
    DefaultColorSpaceResolver,
    NativeColor,
)
from .expression import Expression
from .palettes import Palette, list_palettes, load_palette
from .settings import StyleColorSettings
from .validation import valid_alpha, valid_blue, valid_green, valid_red

__all__ = [
    "StyleColor",
    "ColorDecodeError",
    "NativeColor",
    "ColorSpace",
    "ColorSpaceResolver",
    "DefaultColorSpaceResolver",
    "Expression",
    "Palette",
    "list_palettes",
    "load_palette",
    "StyleColorSettings",
    "valid_red",
    "valid_green",
    "valid_blue",
    "valid_alpha",
]

__version__ = "2026.10.0"
