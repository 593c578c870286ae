"""Page Document Module

In-memory document handle used while authoring. Each page is a PageSlot that
combines:
- an optional base page (a pypdf PageObject loaded from an existing PDF)
- a ReportLab canvas overlay that receives new drawing operations

The overlay is rendered and merged onto the base page whenever the document
is serialized, so a page loaded from scratch storage can keep being drawn on.
"""
import io
from typing import List, Optional, Sequence, Tuple

from pypdf import PageObject, PdfReader, PdfWriter
from reportlab.pdfgen import canvas as pdfcanvas

from ..config import DEFAULT_FONT, DEFAULT_FONT_SIZE
from ..exceptions import PageNotFoundError
from ..layout_options import RGBA, LineCap
from ..utils import read_bytes

# PDF line cap styles
LINE_CAP_STYLES = {
    LineCap.BUTT: 0,
    LineCap.ROUND: 1,
    LineCap.PROJECTING: 2,
}


class PageSlot:
    """One page of a PageDocument.

    Attributes:
        width: Page width in points
        height: Page height in points
        font_name: Default font for draw_text()
        font_size: Default text size for draw_text()
        font_color: Default text color for draw_text()
    """

    def __init__(self, width: float, height: float, base: Optional[PageObject] = None):
        self.width = width
        self.height = height
        self.font_name = DEFAULT_FONT
        self.font_size = DEFAULT_FONT_SIZE
        self.font_color = RGBA()
        self._writer = PdfWriter()
        self._base = self._attach(base) if base is not None else None
        self._buffer: Optional[io.BytesIO] = None
        self._canvas: Optional[pdfcanvas.Canvas] = None

    @classmethod
    def from_page_object(cls, page: PageObject) -> "PageSlot":
        box = page.mediabox
        return cls(float(box.width), float(box.height), base=page)

    def _attach(self, page: PageObject) -> PageObject:
        # merge_page() may only modify pages owned by a writer
        self._writer.add_page(page)
        return self._writer.pages[-1]

    def set_font(self, font_name: str, font_size: Optional[float] = None):
        self.font_name = font_name
        if font_size is not None:
            self.font_size = font_size

    def set_font_color(self, color: RGBA):
        self.font_color = color

    def _get_canvas(self) -> pdfcanvas.Canvas:
        if self._canvas is None:
            self._buffer = io.BytesIO()
            self._canvas = pdfcanvas.Canvas(self._buffer, pagesize=(self.width, self.height))
        return self._canvas

    def draw_text(self, text: str, x: float, y: float, font_name: Optional[str] = None,
                  size: Optional[float] = None, color: Optional[RGBA] = None):
        """Draw `text` with its baseline starting at (x, y) in points."""
        color = color or self.font_color
        canvas = self._get_canvas()
        canvas.saveState()
        canvas.setFont(font_name or self.font_name, self.font_size if size is None else size)
        canvas.setFillColorRGB(*color.rgb, alpha=color.a)
        canvas.drawString(x, y, text)
        canvas.restoreState()

    def draw_line(self, start: Tuple[float, float], end: Tuple[float, float],
                  thickness: float, color: RGBA):
        canvas = self._get_canvas()
        canvas.saveState()
        canvas.setLineWidth(thickness)
        canvas.setStrokeColorRGB(*color.rgb, alpha=color.a)
        canvas.line(start[0], start[1], end[0], end[1])
        canvas.restoreState()

    def draw_rectangle(self, x: float, y: float, width: float, height: float,
                       fill: Optional[RGBA] = None, border: Optional[RGBA] = None,
                       border_width: float = 0,
                       dash_array: Optional[Sequence[float]] = None,
                       dash_phase: Optional[float] = None,
                       line_cap: Optional[LineCap] = None):
        """
        Draw a rectangle with its bottom-left corner at (x, y) in points.

        No fill is drawn when `fill` is None and no border when `border_width`
        is 0.
        """
        stroke = bool(border_width)
        if fill is None and not stroke:
            return

        canvas = self._get_canvas()
        canvas.saveState()
        if fill is not None:
            canvas.setFillColorRGB(*fill.rgb, alpha=fill.a)
        if stroke:
            border = border or RGBA()
            canvas.setStrokeColorRGB(*border.rgb, alpha=border.a)
            canvas.setLineWidth(border_width)
            if dash_array:
                canvas.setDash(list(dash_array), dash_phase or 0)
            if line_cap is not None:
                canvas.setLineCap(LINE_CAP_STYLES[LineCap(line_cap)])
        canvas.rect(x, y, width, height, stroke=int(stroke), fill=int(fill is not None))
        canvas.restoreState()

    def render(self) -> PageObject:
        """Merge pending drawing onto the base page and return it."""
        if self._canvas is not None:
            self._canvas.save()
            self._buffer.seek(0)
            overlay = PdfReader(self._buffer).pages[0]
            if self._base is None:
                self._base = self._attach(overlay)
            else:
                self._base.merge_page(overlay)
            self._canvas = None
            self._buffer = None
        if self._base is None:
            self._base = self._attach(PageObject.create_blank_page(width=self.width, height=self.height))
        return self._base


class PageDocument:
    """A document made of PageSlots.

    The layout engine only ever keeps one of these alive for the page being
    authored, plus short-lived ones for loading and assembling.
    """

    def __init__(self):
        self._pages: List[PageSlot] = []

    @classmethod
    def load(cls, data: bytes) -> "PageDocument":
        document = cls()
        for page in PdfReader(io.BytesIO(data)).pages:
            document.add_copied_page(page)
        return document

    @classmethod
    def from_file(cls, file_path: str) -> "PageDocument":
        """Load a PDF file; the file is not kept open."""
        return cls.load(read_bytes(file_path))

    def add_page(self, size: Tuple[float, float]) -> PageSlot:
        """Append a blank page of (width, height) points."""
        page = PageSlot(size[0], size[1])
        self._pages.append(page)
        return page

    def add_copied_page(self, page: PageObject) -> PageSlot:
        slot = PageSlot.from_page_object(page)
        self._pages.append(slot)
        return slot

    def copy_pages(self, source: "PageDocument", indices: Sequence[int]) -> List[PageObject]:
        """Render pages of `source` so they can be added to this document."""
        return [source.get_page(index).render() for index in indices]

    def remove_page(self, index: int):
        if not 0 <= index < len(self._pages):
            raise PageNotFoundError(index + 1)
        del self._pages[index]

    def get_page(self, index: int) -> PageSlot:
        if not 0 <= index < len(self._pages):
            raise PageNotFoundError(index + 1)
        return self._pages[index]

    def get_page_indices(self) -> List[int]:
        return list(range(len(self._pages)))

    def get_page_count(self) -> int:
        return len(self._pages)

    def save(self) -> bytes:
        """Serialize the document to PDF bytes."""
        writer = PdfWriter()
        for page in self._pages:
            writer.add_page(page.render())
        buffer = io.BytesIO()
        writer.write(buffer)
        return buffer.getvalue()
