"""
Unit tests for SheetConfig.
"""

import pytest

from passport_toolkit.core.models import Dimensions
from passport_toolkit.sheet import SheetConfig


class TestSheetConfigDefaults:
    """Defaults describe an A4 passport sheet at 300 DPI."""

    def test_page_size_when_defaults_then_a4_pixels(self):
        assert SheetConfig().page_size == Dimensions(2480, 3508)

    def test_photo_size_when_defaults_then_passport_pixels(self):
        assert SheetConfig().photo_size == Dimensions(413, 531)

    def test_margin_and_spacing_when_defaults_then_pixels(self):
        config = SheetConfig()
        assert config.margin_px == 118
        assert config.spacing_px == 59

    def test_sheet_name_when_defaults_then_paper_substituted(self):
        assert SheetConfig().resolved_sheet_name == "Passport Photo Sheet (A4)"
        assert SheetConfig(paper_name="LETTER").resolved_sheet_name == "Passport Photo Sheet (LETTER)"

    @pytest.mark.parametrize("template, expected", [
        ("Sheet {size}", "Sheet {size}"),
        ("{} copies", "{} copies"),
        ("{paper} {paper} {0}", "A4 A4 {0}"),
    ])
    def test_sheet_name_when_other_braces_then_kept_literally(self, template, expected):
        assert SheetConfig(sheet_name=template).resolved_sheet_name == expected

    def test_to_placement_config_when_defaults_then_pixel_values(self):
        placement = SheetConfig().to_placement_config()

        assert placement.page_size == Dimensions(2480, 3508)
        assert placement.item_size == Dimensions(413, 531)
        assert placement.margin == 118
        assert placement.spacing == 59

    def test_dpi_when_changed_then_pixels_scale(self):
        config = SheetConfig(dpi=600)
        assert config.page_size == Dimensions(4961, 7016)


class TestSheetConfigValidation:
    """Invalid settings raise ValueError on construction."""

    @pytest.mark.parametrize("field", [
        "page_width_mm", "page_height_mm", "photo_width_mm", "photo_height_mm",
    ])
    def test_init_when_size_not_positive_then_raises_error(self, field):
        with pytest.raises(ValueError, match=f"{field} must be positive"):
            SheetConfig(**{field: 0})

    @pytest.mark.parametrize("field", ["margin_mm", "spacing_mm"])
    def test_init_when_offset_negative_then_raises_error(self, field):
        with pytest.raises(ValueError, match=f"{field} must be non-negative"):
            SheetConfig(**{field: -1})

    def test_init_when_dpi_not_positive_then_raises_error(self):
        with pytest.raises(ValueError, match="dpi must be positive"):
            SheetConfig(dpi=0)

    def test_init_when_border_weight_negative_then_raises_error(self):
        with pytest.raises(ValueError, match="border_weight"):
            SheetConfig(border_weight=-1)

    def test_init_when_color_out_of_range_then_raises_error(self):
        with pytest.raises(ValueError, match="border_color"):
            SheetConfig(border_color=(0.5, 1.5, 0.5))

    def test_init_when_photo_rounds_to_zero_then_raises_error(self):
        with pytest.raises(ValueError, match="zero pixels"):
            SheetConfig(photo_width_mm=0.01, dpi=72)

    @pytest.mark.parametrize("field", ["page_width_mm", "page_height_mm"])
    def test_init_when_page_rounds_to_zero_then_raises_error(self, field):
        with pytest.raises(ValueError, match="Page size rounds to zero pixels"):
            SheetConfig(**{field: 0.01})

    def test_init_when_zero_margin_and_spacing_then_allowed(self):
        config = SheetConfig(margin_mm=0, spacing_mm=0)
        assert config.margin_px == 0
        assert config.spacing_px == 0
