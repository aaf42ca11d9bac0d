"""
Tests for sheet creation against a document host.
"""

from unittest.mock import MagicMock

import pytest

from passport_toolkit.core.models import Dimensions, Element, Paint, PaintType, Stroke
from passport_toolkit.sheet import (
    DocumentHost,
    SelectionError,
    SheetConfig,
    SheetError,
    create_sheet,
    validate_selection,
)
from passport_toolkit.sheet.controller import (
    PROCESSING_MESSAGE,
    SELECT_IMAGE_MESSAGE,
    SELECT_SINGLE_MESSAGE,
)


class TestValidateSelection:
    """Selection must be exactly one element with an image fill."""

    def test_validate_selection_when_single_image_then_returns_it(self, host, photo_element):
        assert validate_selection(host) is photo_element

    def test_validate_selection_when_nothing_selected_then_raises(self, host, photo_element):
        host.select()
        with pytest.raises(SelectionError, match=SELECT_SINGLE_MESSAGE):
            validate_selection(host)

    def test_validate_selection_when_two_selected_then_raises(self, host, photo_element):
        other = host.clone_element(photo_element)
        host.select(photo_element, other)
        with pytest.raises(SelectionError, match=SELECT_SINGLE_MESSAGE):
            validate_selection(host)

    def test_validate_selection_when_solid_fill_only_then_raises(self, host):
        shape = host.add(Element(name="box", width=10, height=10, fills=[Paint.solid((1, 0, 0))]))
        host.select(shape)
        with pytest.raises(SelectionError, match=SELECT_IMAGE_MESSAGE):
            validate_selection(host)

    def test_selection_error_when_raised_then_is_sheet_error(self):
        assert issubclass(SelectionError, SheetError)


class TestCreateSheet:
    """End-to-end sheet creation on the raster host."""

    def test_create_sheet_when_defaults_then_twenty_photos(self, host, photo_element):
        result = create_sheet(host, SheetConfig())

        assert result.placed_count == 20
        assert len(result.sheet.children) == 20
        assert result.layout.columns == 4
        assert result.layout.rows == 5
        assert result.source is photo_element

    def test_create_sheet_when_defaults_then_a4_frame_beside_source(self, host, photo_element):
        sheet = create_sheet(host, SheetConfig()).sheet

        assert sheet.name == "Passport Photo Sheet (A4)"
        assert (sheet.width, sheet.height) == (2480, 3508)
        assert sheet.x == photo_element.x + photo_element.width + 100
        assert sheet.y == photo_element.y
        assert sheet.fills == [Paint.solid((1.0, 1.0, 1.0))]

    def test_create_sheet_when_done_then_photos_at_planned_positions(self, host, photo_element):
        result = create_sheet(host, SheetConfig())

        positions = [(child.x, child.y) for child in result.sheet.children]
        assert positions == [p.as_tuple() for p in result.layout.placements]
        assert positions[:2] == [(118, 118), (590, 118)]

    def test_create_sheet_when_done_then_photos_resized_with_border(self, host, photo_element):
        result = create_sheet(host, SheetConfig())

        for child in result.sheet.children:
            assert (child.width, child.height) == (413, 531)
            assert child.strokes == [Stroke((0.8, 0.8, 0.8), 1.0)]
            assert child.has_image_fill

    def test_create_sheet_when_border_disabled_then_no_strokes(self, host, photo_element):
        result = create_sheet(host, SheetConfig(border=False))

        assert all(child.strokes == [] for child in result.sheet.children)

    def test_create_sheet_when_done_then_source_untouched_and_master_removed(self, host, photo_element):
        result = create_sheet(host, SheetConfig())

        assert host.page == (photo_element, result.sheet)
        assert (photo_element.width, photo_element.height) == (70, 90)
        assert photo_element.strokes == []

    def test_create_sheet_when_done_then_notifies_and_scrolls(self, host, photo_element):
        result = create_sheet(host, SheetConfig())

        messages = [n.message for n in host.notifications]
        assert messages == [
            PROCESSING_MESSAGE,
            "✅ Successfully created A4 sheet with 20 photos!",
        ]
        assert result.message == messages[-1]
        assert host.viewport == [result.sheet]

    def test_create_sheet_when_photo_does_not_fit_then_empty_sheet(self, host, photo_element):
        config = SheetConfig(photo_width_mm=200, photo_height_mm=200, margin_mm=10)

        result = create_sheet(host, config)

        assert result.placed_count == 0
        assert result.sheet.children == []
        assert "with 0 photos" in result.message

    def test_create_sheet_when_invalid_selection_then_nothing_created(self, host, photo_element):
        host.select()

        with pytest.raises(SelectionError):
            create_sheet(host, SheetConfig())

        assert host.page == (photo_element,)
        assert host.notifications == []

    def test_create_sheet_when_append_fails_midway_then_document_restored(self, host, photo_element, monkeypatch):
        append_child = host.append_child
        calls = []

        def failing_append(parent, element):
            calls.append(element)
            if len(calls) == 3:
                raise RuntimeError("host rejected append")
            append_child(parent, element)

        monkeypatch.setattr(host, "append_child", failing_append)

        with pytest.raises(RuntimeError, match="host rejected append"):
            create_sheet(host, SheetConfig())

        assert host.page == (photo_element,)
        assert not any(host.contains(element) for element in calls)
        assert host.selection == (photo_element,)

    def test_create_sheet_when_resize_fails_then_master_removed(self, host, photo_element, monkeypatch):
        def failing_resize(element, size):
            raise RuntimeError("resize failed")

        monkeypatch.setattr(host, "resize", failing_resize)

        with pytest.raises(RuntimeError, match="resize failed"):
            create_sheet(host, SheetConfig())

        assert host.page == (photo_element,)
        assert (photo_element.width, photo_element.height) == (70, 90)

    def test_create_sheet_when_flattened_then_a4_bitmap(self, host, photo_element):
        result = create_sheet(host, SheetConfig())

        img = host.flatten(result.sheet)

        assert img.size == (2480, 3508)
        assert img.getpixel((10, 10)) == (255, 255, 255)
        # Cutting border at the first photo's corner
        assert img.getpixel((118, 118)) == (204, 204, 204)


class TestCreateSheetHostContract:
    """The controller reaches the document only through DocumentHost."""

    def test_create_sheet_when_mock_host_then_master_cloned_per_placement(self):
        source = Element(name="photo", width=70, height=90, fills=[Paint(PaintType.IMAGE)])
        host = MagicMock(spec=DocumentHost)
        host.selection = [source]
        sheet = Element(name="sheet")
        master = Element(name="master")
        host.create_container.return_value = sheet
        host.clone_element.side_effect = [master] + [Element(name=f"p{i}") for i in range(20)]

        result = create_sheet(host, SheetConfig())

        assert result.placed_count == 20
        host.create_container.assert_called_once_with(Dimensions(2480, 3508), name="Passport Photo Sheet (A4)")
        host.resize.assert_called_once_with(master, Dimensions(413, 531))
        assert host.clone_element.call_args_list[0].args == (source,)
        assert all(c.args == (master,) for c in host.clone_element.call_args_list[1:])
        assert host.append_child.call_count == 20
        host.remove.assert_called_once_with(master)
        host.append_to_page.assert_called_once_with(sheet)
