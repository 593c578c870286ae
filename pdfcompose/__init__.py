"""pdfcompose

Bounded, unit-aware PDF page composition on top of ReportLab and pypdf.
"""
from .document_builder import DocumentBuilder, EmbeddedFont, create_document
from .document_builder.coordinate_utils import PageLimits, from_points, resolve_alignment, to_points
from .exceptions import (
    EmptyFileListError,
    FontError,
    NegativeValueError,
    NoPagesToSaveError,
    OutOfRangeColumnError,
    OutOfRangeColumnWithHeightError,
    OutOfRangeError,
    OutOfRangeLineError,
    OutOfRangeLineWithWidthError,
    PageNotFoundError,
    PDFComposeError,
    SourceFileNotFoundError,
)
from .layout_options import (
    RGBA,
    Alignment,
    Area,
    LineCap,
    LineOptions,
    Orientation,
    PageOptions,
    PageSize,
    PageSpacing,
    Position,
    RectangleOptions,
    TextOptions,
    Unit,
)

__version__ = "0.1.0"

__all__ = [
    'DocumentBuilder',
    'EmbeddedFont',
    'create_document',
    'PageLimits',
    'from_points',
    'resolve_alignment',
    'to_points',
    'EmptyFileListError',
    'FontError',
    'NegativeValueError',
    'NoPagesToSaveError',
    'OutOfRangeColumnError',
    'OutOfRangeColumnWithHeightError',
    'OutOfRangeError',
    'OutOfRangeLineError',
    'OutOfRangeLineWithWidthError',
    'PageNotFoundError',
    'PDFComposeError',
    'SourceFileNotFoundError',
    'RGBA',
    'Alignment',
    'Area',
    'LineCap',
    'LineOptions',
    'Orientation',
    'PageOptions',
    'PageSize',
    'PageSpacing',
    'Position',
    'RectangleOptions',
    'TextOptions',
    'Unit',
]
