"""Coordinate Conversion Utilities

This module provides pure utility functions for converting caller-facing
measurements into the coordinate system used to draw on a PDF page:

- Caller coordinates: any supported unit, line (x) from the left edge and
  column (y) growing down the page
- ReportLab/PDF coordinates: points with origin at bottom-left
- Alignment of a drawn extent around its anchor
- Page framing and drawable limits derived from page size and margins

All functions are pure (no side effects) and can be easily tested in
isolation. Bounds checks return a BoundsViolation instead of raising so the
caller decides how to report it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from ..config import CONVERSION_PRECISION, FROM_POINTS_FACTORS, TO_POINTS_FACTORS
from ..layout_options import Alignment, Orientation, PageSize, PageSpacing, Unit

UnitLike = Union[Unit, str, None]


def _enum_value(value) -> Optional[str]:
    if isinstance(value, Enum):
        return value.value
    return value


def to_points(unit: UnitLike, value: Optional[float]) -> float:
    """
    Convert a measurement in `unit` to points.

    Args:
        unit: Source unit ('pt', 'px', 'in', 'cm', 'em', 'mm', 'ex', 'pc')
        value: Measurement, or None

    Returns:
        Points rounded to 2 decimals. None and 0 give 0; an unknown unit
        returns the value unchanged (it is assumed to be points already).

    Examples:
        >>> to_points('in', 1)
        72
        >>> to_points('pc', 2)
        24
        >>> to_points('mm', None)
        0
    """
    if not value:
        return 0
    factor = TO_POINTS_FACTORS.get(_enum_value(unit))
    if factor is None:
        return value
    return round(value * factor, CONVERSION_PRECISION)


def from_points(unit: UnitLike, points: Optional[float]) -> float:
    """
    Convert points back to `unit`.

    Examples:
        >>> from_points('in', 72)
        1.0
        >>> from_points('mm', 28.35)
        10.0

    Notes:
        'em' uses the same factor as to_points(), so em values do not
        round-trip.
    """
    if not points:
        return 0
    factor = FROM_POINTS_FACTORS.get(_enum_value(unit))
    if factor is None:
        return points
    return round(points * factor, CONVERSION_PRECISION)


def resolve_alignment(align: Optional[Alignment], anchor: float, extent: float) -> float:
    """
    Shift a horizontal anchor so that content of width `extent` is aligned on it.

    Examples:
        >>> resolve_alignment('left', 100, 40)
        100
        >>> resolve_alignment('center', 100, 40)
        80.0
        >>> resolve_alignment('right', 100, 40)
        60
    """
    align = _enum_value(align)
    if align == Alignment.CENTER.value:
        return anchor - extent / 2
    if align == Alignment.RIGHT.value:
        return anchor - extent
    return anchor


# Page Geometry

@dataclass(frozen=True)
class PageMargins:
    """Page spacing normalized to points."""

    top: float = 0
    bottom: float = 0
    left: float = 0
    right: float = 0


@dataclass(frozen=True)
class PageFraming:
    """Full page rectangle in points."""

    line_start: float
    line_end: float
    column_start: float
    column_end: float


@dataclass(frozen=True)
class PageLimits:
    """Drawable sub-rectangle in points."""

    start_line: float
    end_line: float
    start_column: float
    end_column: float


@dataclass(frozen=True)
class PageGeometry:
    """Page size, margins and the framing/limits derived from them.

    Build it with from_page(); a new value replaces the old one whenever the
    page size or margins change.
    """

    width: float
    height: float
    spacing: PageMargins
    framing: PageFraming
    limits: PageLimits

    @classmethod
    def from_page(cls, width: float, height: float, spacing: PageMargins) -> "PageGeometry":
        framing = compute_framing(width, height)
        return cls(width, height, spacing, framing, compute_limits(framing, spacing))

    def with_spacing(self, spacing: PageMargins) -> "PageGeometry":
        return PageGeometry.from_page(self.width, self.height, spacing)


def normalize_page_spacing(unit: UnitLike, spacing: Optional[PageSpacing]) -> PageMargins:
    """Convert caller margins to points; missing sides become 0."""
    if spacing is None:
        return PageMargins()
    return PageMargins(
        top=to_points(unit, spacing.top),
        bottom=to_points(unit, spacing.bottom),
        left=to_points(unit, spacing.left),
        right=to_points(unit, spacing.right),
    )


def page_size_in_points(unit: UnitLike, page_size: Optional[PageSize]) -> Optional[Tuple[float, float]]:
    """
    Convert a caller page size to (width, height) in points.

    Returns:
        None when either the unit or the size is missing, so the caller can
        fall back to a default size.

    Examples:
        >>> page_size_in_points('mm', PageSize(line=210, column=297))
        (595.28, 841.89)
    """
    if not unit or page_size is None:
        return None
    return to_points(unit, page_size.line), to_points(unit, page_size.column)


def apply_orientation(size: Tuple[float, float], orientation: Optional[Orientation]) -> Tuple[float, float]:
    """Swap width and height for landscape pages."""
    width, height = size
    if _enum_value(orientation) == Orientation.LANDSCAPE.value:
        return height, width
    return width, height


def compute_framing(width: float, height: float) -> PageFraming:
    return PageFraming(line_start=0, line_end=width, column_start=0, column_end=height)


def compute_limits(framing: PageFraming, spacing: PageMargins) -> PageLimits:
    """
    Inset the page framing by the margins.

    Examples:
        >>> framing = compute_framing(600, 800)
        >>> compute_limits(framing, PageMargins(top=10, bottom=20, left=30, right=40))
        PageLimits(start_line=30, end_line=560, start_column=790, end_column=20)
    """
    return PageLimits(
        start_line=framing.line_start + spacing.left,
        end_line=framing.line_end - spacing.right,
        start_column=framing.column_end - spacing.top,
        end_column=framing.column_start + spacing.bottom,
    )


def column_normalize(column: float, geometry: PageGeometry) -> float:
    """
    Convert a caller column (points) to a PDF y coordinate.

    Examples:
        >>> geometry = PageGeometry.from_page(600, 800, PageMargins(top=10))
        >>> column_normalize(100, geometry)
        700
    """
    return geometry.limits.start_column + geometry.spacing.top - column


# Bounds Checks

class ViolationKind(str, Enum):
    COLUMN = "column"
    COLUMN_WITH_HEIGHT = "column_with_height"
    LINE = "line"
    LINE_WITH_WIDTH = "line_with_width"


@dataclass(frozen=True)
class BoundsViolation:
    """A position outside the drawable area. Both numbers are in points."""

    kind: ViolationKind
    value: float
    limit: float


def check_column(column: float, height: float, geometry: PageGeometry) -> Optional[BoundsViolation]:
    """
    Verify a column (points) lies between the top and bottom margins.

    Content of `height` hanging above the column must also stay below the
    top margin.
    """
    top_bound = geometry.framing.column_start + geometry.spacing.top
    bottom_bound = geometry.framing.column_end - geometry.spacing.bottom
    if column < top_bound:
        return BoundsViolation(ViolationKind.COLUMN, column, top_bound)
    if column > bottom_bound:
        return BoundsViolation(ViolationKind.COLUMN, column, bottom_bound)
    if column - height < top_bound:
        return BoundsViolation(ViolationKind.COLUMN_WITH_HEIGHT, column - height, top_bound)
    return None


def check_line(line: float, width: float, geometry: PageGeometry) -> Optional[BoundsViolation]:
    """Verify a line (points) and the `width` drawn after it lie between the side margins."""
    limits = geometry.limits
    if line < limits.start_line:
        return BoundsViolation(ViolationKind.LINE, line, limits.start_line)
    if line > limits.end_line:
        return BoundsViolation(ViolationKind.LINE, line, limits.end_line)
    if line + width > limits.end_line:
        return BoundsViolation(ViolationKind.LINE_WITH_WIDTH, line + width, limits.end_line)
    return None
