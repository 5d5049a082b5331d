"""Picture export options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

type ExportFormat = Literal["png", "jpeg", "bmp"]

EXPORT_FORMATS: tuple[ExportFormat, ...] = ("png", "jpeg", "bmp")

_EXTENSIONS: dict[str, tuple[str, ...]] = {
    "png": ("png",),
    "jpeg": ("jpg", "jpeg"),
    "bmp": ("bmp",),
}


@dataclass(frozen=True)
class ExportOptions:
    format: ExportFormat = "png"

    def __post_init__(self) -> None:
        if self.format not in EXPORT_FORMATS:
            raise ValueError(f"unsupported export format: {self.format}")

    @property
    def mime_type(self) -> str:
        return f"image/{self.format}"

    @property
    def extensions(self) -> tuple[str, ...]:
        return _EXTENSIONS[self.format]

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> ExportOptions:
        return cls(format=payload.get("format", "png"))

    def to_payload(self) -> dict[str, Any]:
        return {"format": self.format}
