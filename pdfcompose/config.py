"""Configuration Constants

Defaults for page creation, scratch storage and unit conversion.
"""
import os
import tempfile

from reportlab.lib.pagesizes import A4

# Page Defaults
DEFAULT_UNIT = "mm"
DEFAULT_FONT = "Helvetica"
DEFAULT_FONT_SIZE = 7.5
DEFAULT_ORIENTATION = "portrait"
DEFAULT_FONT_COLOR = (0.0, 0.0, 0.0, 1.0)  # opaque black (r, g, b, a)
DEFAULT_PAGE_SIZE = A4  # (width, height) in points
DEFAULT_LINE_THICKNESS = 1.0  # points

# Scratch Storage
SCRATCH_DIR_NAME = ".pdfcompose"
SCRATCH_DIR_ENV_VAR = "PDFCOMPOSE_SCRATCH_DIR"
SCRATCH_PREFIX_BYTES = 5  # 10 hex characters


def default_scratch_dir() -> str:
    """Scratch directory: env override, else a fixed folder under the platform temp dir."""
    override = os.environ.get(SCRATCH_DIR_ENV_VAR)
    if override:
        return override
    return os.path.join(tempfile.gettempdir(), SCRATCH_DIR_NAME)


# Unit Conversion (multiply to get points)
TO_POINTS_FACTORS = {
    "pt": 1,
    "px": 0.75,
    "in": 72,
    "cm": 28.3465,
    "em": 0.0836,
    "mm": 2.83465,
    "ex": 4.30554,
    "pc": 12,
}

# Unit Conversion (multiply points to get the unit)
# NOTE: em uses the same factor in both directions.
FROM_POINTS_FACTORS = {
    "pt": 1,
    "px": 1.3333333333333333,
    "in": 0.013888888888888888,
    "cm": 0.0352778,
    "em": 0.0836,
    "mm": 0.352778,
    "ex": 0.23255,
    "pc": 0.08333,
}

CONVERSION_PRECISION = 2  # decimal places
