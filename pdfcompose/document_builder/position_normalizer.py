"""Position Normalizer Module

Turns caller positions into validated drawing coordinates for the active page.
"""
from typing import Optional, Tuple

from ..exceptions import (
    OutOfRangeColumnError,
    OutOfRangeColumnWithHeightError,
    OutOfRangeError,
    OutOfRangeLineError,
    OutOfRangeLineWithWidthError,
)
from ..layout_options import Alignment, Position
from .coordinate_utils import (
    BoundsViolation,
    PageGeometry,
    UnitLike,
    ViolationKind,
    check_column,
    check_line,
    column_normalize,
    from_points,
    resolve_alignment,
    to_points,
)

_VIOLATION_ERRORS = {
    ViolationKind.COLUMN: OutOfRangeColumnError,
    ViolationKind.COLUMN_WITH_HEIGHT: OutOfRangeColumnWithHeightError,
    ViolationKind.LINE: OutOfRangeLineError,
    ViolationKind.LINE_WITH_WIDTH: OutOfRangeLineWithWidthError,
}


class PositionNormalizer:
    """Converts positions in the document unit to PDF coordinates in points.

    Every position is checked against the page limits before it is returned;
    nothing is clamped.

    Attributes:
        geometry: Geometry of the active page
        unit: Document unit of incoming positions
    """

    def __init__(self, geometry: PageGeometry, unit: UnitLike):
        self.geometry = geometry
        self.unit = unit

    def normalize_point(self, position: Position) -> Tuple[float, float]:
        """
        Normalize a line/rectangle corner.

        Returns:
            (x, y) in points with origin at bottom-left

        Raises:
            OutOfRangeError: If the point is outside the drawable area
        """
        line = to_points(self.unit, position.line_position)
        column = to_points(self.unit, position.column_position)
        self._verify(line, column, 0, 0)
        return line, column_normalize(column, self.geometry)

    def normalize_text(self, position: Position, width: float, height: float,
                       align: Optional[Alignment] = None) -> Tuple[float, float]:
        """
        Normalize a text anchor.

        Args:
            position: Anchor in the document unit
            width: Measured text width in points
            height: Measured text height in points
            align: Horizontal alignment around the anchor

        Returns:
            (x, y) of the text baseline start in points

        Notes:
            For centered text only the half extending right of the anchor is
            checked against the right margin.
        """
        align = align or Alignment.LEFT
        line = to_points(self.unit, position.line_position)
        column = to_points(self.unit, position.column_position)
        line = resolve_alignment(align, line, width)
        checked_width = width / 2 if align == Alignment.CENTER else width
        self._verify(line, column, checked_width, height)
        return line, column_normalize(column, self.geometry)

    def _verify(self, line: float, column: float, width: float, height: float):
        violation = check_column(column, height, self.geometry) or check_line(line, width, self.geometry)
        if violation is not None:
            raise self.to_error(violation)

    def to_error(self, violation: BoundsViolation) -> OutOfRangeError:
        """Build the exception for a violation, with numbers in the document unit."""
        error_class = _VIOLATION_ERRORS[violation.kind]
        unit = getattr(self.unit, "value", self.unit)
        return error_class(
            from_points(self.unit, violation.value),
            from_points(self.unit, violation.limit),
            unit,
        )
