"""Value types shared by dialogs and the painting surface."""

from easel.models.dimension import DEFAULT_PRESETS, DimensionPreset, DimensionSelection, PictureDimension
from easel.models.export import EXPORT_FORMATS, ExportOptions
from easel.models.geometry import Rect, Vec2, opaque_bounding_rect
from easel.models.shortcut import KEY_MODIFIERS, KeyInput, ToolShortcuts

__all__ = [
    "DEFAULT_PRESETS",
    "EXPORT_FORMATS",
    "KEY_MODIFIERS",
    "DimensionPreset",
    "DimensionSelection",
    "ExportOptions",
    "KeyInput",
    "PictureDimension",
    "Rect",
    "ToolShortcuts",
    "Vec2",
    "opaque_bounding_rect",
]
