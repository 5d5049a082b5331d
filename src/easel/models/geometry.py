"""Plane geometry value types and the opaque-pixel bounding box scan."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Vec2:
    """A point or a size."""

    x: float
    y: float

    @property
    def width(self) -> float:
        return self.x

    @property
    def height(self) -> float:
        return self.y

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def squared_length(self) -> float:
        return self.x * self.x + self.y * self.y

    def atan2(self) -> float:
        return math.atan2(self.y, self.x)

    def floor(self) -> Vec2:
        return Vec2(math.floor(self.x), math.floor(self.y))

    def ceil(self) -> Vec2:
        return Vec2(math.ceil(self.x), math.ceil(self.y))

    def frac(self) -> Vec2:
        return self - self.floor()

    def __str__(self) -> str:
        return f"Vec2({self.x:g},{self.y:g})"


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle; `bottom_right` is exclusive."""

    top_left: Vec2
    bottom_right: Vec2

    @classmethod
    def from_bounds(cls, left: float, top: float, right: float, bottom: float) -> Rect:
        return cls(Vec2(left, top), Vec2(right, bottom))

    @property
    def left(self) -> float:
        return self.top_left.x

    @property
    def top(self) -> float:
        return self.top_left.y

    @property
    def right(self) -> float:
        return self.bottom_right.x

    @property
    def bottom(self) -> float:
        return self.bottom_right.y

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def size(self) -> Vec2:
        return self.bottom_right - self.top_left

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, point: Vec2) -> bool:
        return self.left <= point.x < self.right and self.top <= point.y < self.bottom

    def translate(self, offset: Vec2) -> Rect:
        return Rect(self.top_left + offset, self.bottom_right + offset)

    def inflate(self, amount: float) -> Rect:
        delta = Vec2(amount, amount)
        return Rect(self.top_left - delta, self.bottom_right + delta)

    def union(self, other: Rect) -> Rect:
        return Rect.from_bounds(
            min(self.left, other.left),
            min(self.top, other.top),
            max(self.right, other.right),
            max(self.bottom, other.bottom),
        )

    def intersection(self, other: Rect) -> Rect | None:
        left = max(self.left, other.left)
        top = max(self.top, other.top)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        if right <= left or bottom <= top:
            return None
        return Rect.from_bounds(left, top, right, bottom)


def opaque_bounding_rect(data: bytes | bytearray | memoryview, width: int, height: int) -> Rect | None:
    """Tightest rectangle enclosing every pixel with non-zero alpha.

    `data` holds `width * height` RGBA quadruplets, row-major. Returns None
    when every pixel is fully transparent.
    """
    if width < 0 or height < 0:
        raise ValueError(f"negative size {width}x{height}")
    expected = 4 * width * height
    if len(data) != expected:
        raise ValueError(f"expected {expected} bytes for {width}x{height} RGBA, got {len(data)}")
    if expected == 0:
        return None

    alpha = np.frombuffer(data, dtype=np.uint8)[3::4].reshape(height, width) != 0
    rows = np.flatnonzero(alpha.any(axis=1))
    if rows.size == 0:
        return None
    cols = np.flatnonzero(alpha.any(axis=0))
    return Rect.from_bounds(int(cols[0]), int(rows[0]), int(cols[-1]) + 1, int(rows[-1]) + 1)
