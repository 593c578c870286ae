"""Layout Options Dataclasses

Value types accepted by the public API: units, alignment, positions, colors,
page options and per-primitive drawing options.
"""
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Union

from .exceptions import NegativeValueError

if TYPE_CHECKING:
    from .document_builder.font_manager import EmbeddedFont


class Unit(str, Enum):
    """Measurement units understood by the unit converter."""

    POINT = "pt"
    PIXEL = "px"
    INCH = "in"
    CENTIMETER = "cm"
    EM = "em"
    MILLIMETER = "mm"
    EX = "ex"
    PICA = "pc"


class Alignment(str, Enum):
    """Horizontal text alignment relative to the anchor position."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class Orientation(str, Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class LineCap(str, Enum):
    """Rectangle border line cap (values map to PDF line cap styles 0-2)."""

    BUTT = "butt"
    ROUND = "round"
    PROJECTING = "projecting"


@dataclass
class Position:
    """A caller-facing position in the document unit.

    Attributes:
        line_position: Horizontal offset from the left page edge
        column_position: Vertical offset, converted with column_normalize()
    """

    line_position: float
    column_position: float


@dataclass
class PageSize:
    """Page dimensions in the unit of the options they belong to."""

    line: float
    column: float


@dataclass
class PageSpacing:
    """Page margins. A missing side means no margin on that side."""

    top: Optional[float] = None
    bottom: Optional[float] = None
    left: Optional[float] = None
    right: Optional[float] = None


@dataclass
class Area:
    width: float
    height: float


@dataclass
class RGBA:
    """Color with components and alpha in [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    def __post_init__(self):
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not (0.0 <= value <= 1.0):
                raise ValueError(f"{name} must be between 0.0-1.0, got {value}")

    @property
    def rgb(self):
        return self.r, self.g, self.b


@dataclass
class PageOptions:
    """Options for creating a document or adding a page.

    Every field is optional. Missing fields fall back independently to the
    values active on the previous page (or the library defaults for the first
    page).

    Attributes:
        unit: Unit used for page_size, page_spacing and all later positions
        orientation: Portrait or landscape (landscape swaps width and height)
        page_size: Page width/height in `unit`
        page_spacing: Page margins in `unit`
        font: Standard font name or path to a TrueType font file
        font_size: Default text size in points
        font_color: Default text color
    """

    unit: Optional[Unit] = None
    orientation: Optional[Orientation] = None
    page_size: Optional[PageSize] = None
    page_spacing: Optional[PageSpacing] = None
    font: Optional[str] = None
    font_size: Optional[float] = None
    font_color: Optional[RGBA] = None

    def __post_init__(self):
        """Coerce plain strings to enums and validate sizes."""
        if self.unit is not None:
            self.unit = Unit(self.unit)
        if self.orientation is not None:
            self.orientation = Orientation(self.orientation)
        if self.font_size is not None and self.font_size < 0:
            raise NegativeValueError("font_size", self.font_size)


@dataclass
class TextOptions:
    """Options for write_text(). `font` may be a name, a path or a font handle."""

    position: Position
    align: Optional[Alignment] = Alignment.LEFT
    size: Optional[float] = None
    color: Optional[RGBA] = None
    font: Optional[Union[str, "EmbeddedFont"]] = None

    def __post_init__(self):
        if self.align is not None:
            self.align = Alignment(self.align)


@dataclass
class LineOptions:
    """Options for write_line(). Thickness is in points."""

    start: Position
    end: Position
    thickness: Optional[float] = None
    color: Optional[RGBA] = None


@dataclass
class RectangleOptions:
    """Options for write_rectangle().

    Attributes:
        start: Top-left corner of the rectangle
        area: Width/height in the document unit
        area_color: Fill color; None draws no fill
        border_color: Border color (defaults to opaque black)
        border_width: Border width in the document unit; None or 0 draws no border
        border_dash_array: Dash pattern in points
        border_dash_phase: Dash phase in points
        border_line_cap: Border line cap style
    """

    start: Position
    area: Area
    area_color: Optional[RGBA] = None
    border_color: Optional[RGBA] = None
    border_width: Optional[float] = None
    border_dash_array: Optional[List[float]] = None
    border_dash_phase: Optional[float] = None
    border_line_cap: Optional[LineCap] = None

    def __post_init__(self):
        if self.border_line_cap is not None:
            self.border_line_cap = LineCap(self.border_line_cap)
        if self.area.width < 0:
            raise NegativeValueError("width", self.area.width)
        if self.area.height < 0:
            raise NegativeValueError("height", self.area.height)
