"""Font Manager Module

Handles font resolution (standard PDF fonts or TrueType files on disk),
registration with ReportLab, and text measurement.
"""
import logging
import os
from dataclasses import dataclass
from typing import Dict, Optional, Union

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont

from ..config import DEFAULT_FONT
from ..exceptions import FontError, SourceFileNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmbeddedFont:
    """Handle for a font registered with ReportLab.

    Attributes:
        name: Registered font name, used when drawing
        path: TrueType file the font was loaded from (None for standard fonts)
    """

    name: str
    path: Optional[str] = None

    def height_at_size(self, size: float) -> float:
        """Height (ascent to descent) of the font at `size`, in points."""
        ascent, descent = pdfmetrics.getAscentDescent(self.name, size)
        return ascent - descent

    def width_of_text_at_size(self, text: str, size: float) -> float:
        """Width of `text` set at `size`, in points."""
        return pdfmetrics.stringWidth(text, self.name, size)


FontLike = Union[str, EmbeddedFont, None]


class FontManager:
    """Resolves font specifications to EmbeddedFont handles.

    A specification is either:
    - an EmbeddedFont (returned as is)
    - a path to an existing TrueType file (registered once, then cached)
    - a standard PDF font name such as 'Helvetica' or 'Times-Bold'

    ReportLab keeps registered fonts in a process-wide registry, so a font
    loaded by one document is available to every other document.
    """

    def __init__(self):
        self._custom_fonts: Dict[str, EmbeddedFont] = {}

    def resolve(self, font: FontLike, default: Optional[EmbeddedFont] = None) -> EmbeddedFont:
        """
        Resolve a font specification.

        Args:
            font: Font handle, TrueType path, standard font name, or None
            default: Returned when `font` is None (falls back to Helvetica)

        Raises:
            FontError: If the name is unknown or the file can't be embedded
        """
        if font is None:
            return default or self.get_font_by_name(DEFAULT_FONT)
        if isinstance(font, EmbeddedFont):
            return font
        if os.path.exists(font):
            return self.get_custom_font(font)
        return self.get_font_by_name(font)

    def get_font_by_name(self, name: str) -> EmbeddedFont:
        """
        Get a handle for a standard font or an already registered font.

        Raises:
            FontError: If ReportLab doesn't know the font
        """
        try:
            pdfmetrics.getFont(name)
        except KeyError as e:
            raise FontError(f"Unknown font '{name}'") from e
        return EmbeddedFont(name)

    def get_custom_font(self, font_path: str) -> EmbeddedFont:
        """
        Register a TrueType font file and return its handle.

        The font is registered under the file name without extension.

        Raises:
            SourceFileNotFoundError: If the file doesn't exist
            FontError: If ReportLab can't read the font
        """
        if not os.path.exists(font_path):
            raise SourceFileNotFoundError(font_path)

        key = os.path.abspath(font_path)
        cached = self._custom_fonts.get(key)
        if cached is not None:
            return cached

        font_name = os.path.splitext(os.path.basename(font_path))[0]
        try:
            pdfmetrics.registerFont(TTFont(font_name, font_path))
        except TTFError as e:
            raise FontError(f"Failed to register font {font_path}: {e}") from e

        font = EmbeddedFont(font_name, key)
        self._custom_fonts[key] = font
        logger.debug("Registered font %s from %s", font_name, font_path)
        return font
