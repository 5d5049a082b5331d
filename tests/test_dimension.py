from __future__ import annotations

import pytest

from easel.models.dimension import DimensionSelection, PictureDimension
from easel.models.export import ExportOptions
from easel.models.geometry import Vec2


def test_default_selection_starts_on_first_preset() -> None:
    selection = DimensionSelection()

    assert selection.last_selected_preset == 0
    assert selection.unit == "mm"
    assert selection.dimension == PictureDimension(1191, 1684, 144)


def test_pixel_preset() -> None:
    selection = DimensionSelection()
    selection.set_preset(3)

    assert selection.unit == "px"
    assert selection.dimension == PictureDimension(1200, 800, 144)


def test_change_size_keeps_ratio() -> None:
    selection = DimensionSelection(PictureDimension(400, 200))

    selection.change_size(width=100)
    assert selection.size == Vec2(100, 50)

    selection.change_size(height=100)
    assert selection.size == Vec2(200, 100)
    assert selection.last_selected_preset == -1


def test_change_size_free_ratio_updates_ratio() -> None:
    selection = DimensionSelection(PictureDimension(400, 200))
    selection.keep_ratio = False

    selection.change_size(300, 300)
    assert selection.ratio == 1

    selection.keep_ratio = True
    selection.change_size(width=50)
    assert selection.size == Vec2(50, 50)


def test_units_convert_through_dpi() -> None:
    selection = DimensionSelection(PictureDimension(300, 150, dpi=300))

    selection.unit = "inch"
    assert selection.width_in_unit == 1
    selection.unit = "mm"
    assert selection.width_in_unit == pytest.approx(25.4)
    selection.unit = "percent"
    assert selection.height_in_unit == 100


def test_change_dpi_keeps_physical_size() -> None:
    selection = DimensionSelection(PictureDimension(72, 144, dpi=72))
    selection.unit = "inch"

    selection.change_dpi(144)

    assert selection.dimension == PictureDimension(144, 288, 144)


def test_change_dpi_in_pixels_keeps_pixels() -> None:
    selection = DimensionSelection(PictureDimension(640, 480, dpi=72))

    selection.change_dpi(300)

    assert selection.dimension == PictureDimension(640, 480, 300)


def test_validity_bounds() -> None:
    selection = DimensionSelection(PictureDimension(100, 100), max_size=500)
    assert selection.is_valid

    selection.change_size(width=600)
    assert selection.too_large
    assert not selection.is_valid

    selection.change_size(width=0.2)
    assert not selection.too_large
    assert not selection.is_valid


def test_export_options() -> None:
    options = ExportOptions.from_payload({"format": "jpeg"})

    assert options.mime_type == "image/jpeg"
    assert options.extensions == ("jpg", "jpeg")
    assert options.to_payload() == {"format": "jpeg"}
    assert ExportOptions.from_payload({}) == ExportOptions("png")
    with pytest.raises(ValueError):
        ExportOptions("gif")  # type: ignore[arg-type]
