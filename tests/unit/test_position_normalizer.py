"""Tests for PositionNormalizer."""
import pytest

from pdfcompose.document_builder.coordinate_utils import (
    BoundsViolation,
    PageGeometry,
    PageMargins,
    ViolationKind,
)
from pdfcompose.document_builder.position_normalizer import PositionNormalizer
from pdfcompose.exceptions import (
    OutOfRangeColumnError,
    OutOfRangeColumnWithHeightError,
    OutOfRangeError,
    OutOfRangeLineError,
    OutOfRangeLineWithWidthError,
)
from pdfcompose.layout_options import Alignment, Position, Unit


@pytest.fixture
def normalizer():
    geometry = PageGeometry.from_page(600, 800, PageMargins(top=20, bottom=20, left=20, right=20))
    return PositionNormalizer(geometry, Unit.POINT)


class TestNormalizePoint:
    def test_returns_pdf_coordinates(self, normalizer):
        assert normalizer.normalize_point(Position(100, 100)) == (100, 700)

    def test_on_margin_is_accepted(self, normalizer):
        assert normalizer.normalize_point(Position(20, 780)) == (20, 20)

    def test_line_outside_left_margin(self, normalizer):
        with pytest.raises(OutOfRangeLineError):
            normalizer.normalize_point(Position(10, 100))

    def test_column_checked_before_line(self, normalizer):
        with pytest.raises(OutOfRangeColumnError):
            normalizer.normalize_point(Position(10, 790))


class TestNormalizeText:
    def test_left_alignment_keeps_anchor(self, normalizer):
        assert normalizer.normalize_text(Position(100, 100), 50, 10) == (100, 700)

    def test_right_alignment_shifts_by_width(self, normalizer):
        x, _ = normalizer.normalize_text(Position(300, 100), 50, 10, Alignment.RIGHT)
        assert x == 250

    def test_center_alignment_shifts_by_half_width(self, normalizer):
        x, _ = normalizer.normalize_text(Position(300, 100), 50, 10, "center")
        assert x == 275

    def test_text_crossing_right_margin(self, normalizer):
        with pytest.raises(OutOfRangeLineWithWidthError):
            normalizer.normalize_text(Position(550, 100), 50, 10)

    def test_right_aligned_text_fits_at_right_margin(self, normalizer):
        x, _ = normalizer.normalize_text(Position(580, 100), 50, 10, Alignment.RIGHT)
        assert x == 530

    def test_text_height_crossing_top_margin(self, normalizer):
        with pytest.raises(OutOfRangeColumnWithHeightError):
            normalizer.normalize_text(Position(100, 25), 50, 10)


def test_error_reports_values_in_document_unit():
    geometry = PageGeometry.from_page(612, 792, PageMargins(left=72))
    normalizer = PositionNormalizer(geometry, Unit.INCH)

    with pytest.raises(OutOfRangeLineError) as exc_info:
        normalizer.normalize_point(Position(0.5, 1))

    error = exc_info.value
    assert error.value == 0.5
    assert error.limit == 1
    assert error.unit == "in"
    assert str(error) == "Line 0.5 is out of range. Range: 1.0"


def test_to_error_maps_each_violation_kind(normalizer):
    expected = {
        ViolationKind.COLUMN: OutOfRangeColumnError,
        ViolationKind.COLUMN_WITH_HEIGHT: OutOfRangeColumnWithHeightError,
        ViolationKind.LINE: OutOfRangeLineError,
        ViolationKind.LINE_WITH_WIDTH: OutOfRangeLineWithWidthError,
    }
    for kind, error_class in expected.items():
        error = normalizer.to_error(BoundsViolation(kind, 5, 20))
        assert type(error) is error_class
        assert isinstance(error, OutOfRangeError)
