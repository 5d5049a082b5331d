"""Picture dimensions and the size-selection state behind the size dialogs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from easel.models.geometry import Vec2

type DimensionUnit = Literal["px", "mm", "inch", "percent"]
type Axis = Literal["width", "height"]

MM_PER_INCH = 25.4


@dataclass(frozen=True)
class PictureDimension:
    width: int
    height: int
    dpi: float = 72

    @property
    def size(self) -> Vec2:
        return Vec2(self.width, self.height)


@dataclass(frozen=True)
class DimensionPreset:
    name: str
    unit: DimensionUnit
    width: float
    height: float
    dpi: float


DEFAULT_PRESETS: tuple[DimensionPreset, ...] = (
    DimensionPreset("A4", "mm", 210, 297, 144),
    DimensionPreset("A5", "mm", 148, 210, 144),
    DimensionPreset("A6", "mm", 105, 148, 144),
    DimensionPreset("1200 x 800", "px", 1200, 800, 144),
)


class DimensionSelection:
    """Editable width/height/dpi with unit conversion and an optional locked ratio.

    Width and height are stored in pixels; `unit` only changes how
    `change_size` interprets its arguments and how `width_in_unit` reports.
    Percentages are relative to the size the selection was created from.
    """

    def __init__(
        self,
        init: PictureDimension | None = None,
        *,
        max_size: int = 10000,
        presets: tuple[DimensionPreset, ...] = DEFAULT_PRESETS,
    ) -> None:
        self.presets = presets
        self.max_size = max_size
        self.percent_base_width = 100.0
        self.percent_base_height = 100.0
        self.width = 100.0
        self.height = 100.0
        self.dpi = 72.0
        self.unit: DimensionUnit = "px"
        self.ratio = 1.0
        self.keep_ratio = True
        self.last_selected_preset = -1
        if init is not None:
            self.reset(init)
        else:
            self.set_preset(0)

    @property
    def size(self) -> Vec2:
        return Vec2(self.width, self.height)

    @property
    def width_rounded(self) -> int:
        return round(self.width)

    @property
    def height_rounded(self) -> int:
        return round(self.height)

    @property
    def width_in_unit(self) -> float:
        return self._from_px(self.width, self.unit, "width")

    @property
    def height_in_unit(self) -> float:
        return self._from_px(self.height, self.unit, "height")

    @property
    def dimension(self) -> PictureDimension:
        return PictureDimension(self.width_rounded, self.height_rounded, self.dpi)

    @property
    def too_large(self) -> bool:
        return self.width_rounded > self.max_size or self.height_rounded > self.max_size

    @property
    def is_valid(self) -> bool:
        return 0 < self.width_rounded and 0 < self.height_rounded and not self.too_large

    def reset(self, init: PictureDimension) -> None:
        self.width = self.percent_base_width = float(init.width)
        self.height = self.percent_base_height = float(init.height)
        self.dpi = float(init.dpi)
        self.ratio = self.height / self.width if self.width else 1.0
        self.last_selected_preset = -1

    def set_preset(self, index: int) -> None:
        preset = self.presets[index]
        keep_ratio = self.keep_ratio
        self.dpi = float(preset.dpi)
        self.unit = preset.unit
        self.keep_ratio = False
        self.change_size(preset.width, preset.height)
        self.keep_ratio = keep_ratio
        self.last_selected_preset = index

    def change_size(self, width: float | None = None, height: float | None = None) -> None:
        """Set width and/or height in the current unit, honouring `keep_ratio`."""
        w = self._to_px(width, self.unit, "width") if width is not None else None
        h = self._to_px(height, self.unit, "height") if height is not None else None
        if w is None and h is not None and self.keep_ratio:
            w = h / self.ratio
        if w is not None and h is None and self.keep_ratio:
            h = w * self.ratio
        if w is not None:
            self.width = w
        if h is not None:
            self.height = h
        if not self.keep_ratio and self.width:
            self.ratio = self.height / self.width
        self.last_selected_preset = -1

    def change_dpi(self, dpi: float) -> None:
        """Change dpi while keeping the size in the current unit."""
        width, height = self.width_in_unit, self.height_in_unit
        self.dpi = float(dpi)
        self.change_size(width, height)

    def _to_px(self, value: float, unit: DimensionUnit, axis: Axis) -> float:
        if unit == "px":
            return float(value)
        if unit == "mm":
            return value / MM_PER_INCH * self.dpi
        if unit == "inch":
            return value * self.dpi
        if unit == "percent":
            return value / 100 * self._percent_base(axis)
        raise ValueError(f"unknown unit: {unit}")

    def _from_px(self, px: float, unit: DimensionUnit, axis: Axis) -> float:
        if unit == "px":
            return px
        if unit == "mm":
            return px / self.dpi * MM_PER_INCH
        if unit == "inch":
            return px / self.dpi
        if unit == "percent":
            return px / self._percent_base(axis) * 100
        raise ValueError(f"unknown unit: {unit}")

    def _percent_base(self, axis: Axis) -> float:
        return self.percent_base_width if axis == "width" else self.percent_base_height
