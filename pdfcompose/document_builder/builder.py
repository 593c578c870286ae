"""Document Builder Module

Orchestrates page-by-page PDF authoring by coordinating specialized components:
- FontManager: Font resolution and text measurement
- PositionNormalizer: Unit conversion, alignment and bounds checks
- PageDocument: In-memory handle for the page being authored
- PageStore: Scratch files for finished pages
- DocumentAssembler: Final flattening into one output file
- coordinate_utils: Page geometry and unit conversion

Only one page is kept in memory. Every page transition (add, select, clear,
remove, load, merge) first writes the active page to scratch storage and then
replaces the active document with a new one.
"""
import logging
from typing import List, Optional

from ..config import (
    DEFAULT_FONT,
    DEFAULT_FONT_COLOR,
    DEFAULT_FONT_SIZE,
    DEFAULT_LINE_THICKNESS,
    DEFAULT_ORIENTATION,
    DEFAULT_PAGE_SIZE,
    DEFAULT_UNIT,
    default_scratch_dir,
)
from ..exceptions import NegativeValueError, NoPagesToSaveError, PageNotFoundError
from ..layout_options import (
    RGBA,
    LineOptions,
    Orientation,
    PageOptions,
    PageSpacing,
    Position,
    RectangleOptions,
    TextOptions,
    Unit,
)
from ..utils import validate_source_path, validate_source_paths, write_bytes
from .assembler import DocumentAssembler
from .coordinate_utils import (
    PageGeometry,
    PageLimits,
    PageMargins,
    apply_orientation,
    from_points,
    normalize_page_spacing,
    page_size_in_points,
    to_points,
)
from .font_manager import EmbeddedFont, FontLike, FontManager
from .page_document import PageDocument, PageSlot
from .page_store import PageStore
from .position_normalizer import PositionNormalizer

logger = logging.getLogger(__name__)


class DocumentBuilder:
    """Build a multi-page PDF one page at a time.

    Positions, sizes and margins are given in the document unit (millimeters
    by default). Anything that would land outside the page margins raises an
    OutOfRangeError before it is drawn.

    Example:
        >>> builder = DocumentBuilder(PageOptions(unit='mm', page_spacing=PageSpacing(10, 10, 10, 10)))
        >>> builder.write_text('Hello', TextOptions(position=Position(20, 30)))
        >>> builder.add_page()
        >>> builder.save('out.pdf')
    """

    def __init__(self, options: Optional[PageOptions] = None, scratch_dir: Optional[str] = None):
        """
        Initialize the builder with its first page.

        Args:
            options: Page options for the first page (every field optional)
            scratch_dir: Directory for scratch files; defaults to
                         config.default_scratch_dir()
        """
        self.font_manager = FontManager()
        self.assembler = DocumentAssembler()
        self.store = PageStore(scratch_dir or default_scratch_dir())

        # Settings inherited by every new page
        self._unit = Unit(DEFAULT_UNIT)
        self._orientation = Orientation(DEFAULT_ORIENTATION)
        self._base_page_size = DEFAULT_PAGE_SIZE
        self._spacing = PageMargins()
        self._font_spec: str = DEFAULT_FONT
        self._font_size = DEFAULT_FONT_SIZE
        self._font_color = RGBA(*DEFAULT_FONT_COLOR)

        # Active page state, replaced on every transition
        self._document = PageDocument()
        self._page: Optional[PageSlot] = None
        self._font: EmbeddedFont = self.font_manager.resolve(DEFAULT_FONT)
        self._page_font: EmbeddedFont = self._font
        self._geometry = PageGeometry.from_page(*DEFAULT_PAGE_SIZE, self._spacing)

        self._page_count = 1
        self._selected_page = 1
        self._create_page(options or PageOptions())

    # Page setup

    def _create_page(self, options: PageOptions):
        """Replace the active document with a new one holding a fresh page.

        Each option falls back independently to the value used by the
        previous page.
        """
        unit = options.unit or self._unit
        font_spec = options.font or self._font_spec
        font = self.font_manager.resolve(font_spec)
        base_size = page_size_in_points(unit, options.page_size) or self._base_page_size
        orientation = options.orientation or self._orientation
        if options.page_spacing is not None:
            spacing = normalize_page_spacing(unit, options.page_spacing)
        else:
            spacing = self._spacing

        self._unit = unit
        self._font_spec = font_spec
        self._font = font
        self._base_page_size = base_size
        self._orientation = orientation
        self._spacing = spacing
        if options.font_size is not None:
            self._font_size = options.font_size
        if options.font_color is not None:
            self._font_color = options.font_color

        document = PageDocument()
        page = document.add_page(apply_orientation(base_size, orientation))
        self._activate(document, page)

    def _activate(self, document: PageDocument, page: PageSlot):
        """Make `page` of `document` the active page and recompute its geometry."""
        self._document = document
        self._page = page
        self._geometry = PageGeometry.from_page(page.width, page.height, self._spacing)
        self._page_font = self._font
        page.set_font(self._font.name, self._font_size)
        page.set_font_color(self._font_color)
        logger.debug("Active page geometry: %s", self._geometry.limits)

    def _activate_file(self, file_path: str):
        document = PageDocument.from_file(file_path)
        self._activate(document, document.get_page(0))

    def _require_page(self) -> PageSlot:
        if self._page is None:
            raise PageNotFoundError(self._selected_page)
        return self._page

    def _normalizer(self) -> PositionNormalizer:
        return PositionNormalizer(self._geometry, self._unit)

    def _flush(self):
        """Persist the active page into its slot of the scratch record."""
        if self._page is None:
            return
        file_path = self.store.write_page(self._selected_page, self._document.save())
        logger.debug("Persisted page %d to %s", self._selected_page, file_path)

    def set_page_spacing(self, page_spacing: PageSpacing):
        """Set page margins (document unit) and recompute the page limits."""
        self._spacing = normalize_page_spacing(self._unit, page_spacing)
        self._geometry = self._geometry.with_spacing(self._spacing)

    def set_page_font(self, font: FontLike):
        """
        Set the font of the active page.

        That doesn't change the general font used for new pages.
        """
        page = self._require_page()
        self._page_font = self.font_manager.resolve(font, default=self._font)
        page.set_font(self._page_font.name)

    def set_custom_font(self, font_path: str):
        """
        Load a TrueType font and use it as the general font.

        The active page switches to it and pages added later without an
        explicit font keep using it.
        """
        font = self.font_manager.get_custom_font(font_path)
        self._font = font
        self._font_spec = font_path
        self._page_font = font
        if self._page is not None:
            self._page.set_font(font.name)

    def get_custom_font(self, font_path: str) -> EmbeddedFont:
        """Get a font handle for a TrueType file, e.g. for TextOptions.font."""
        return self.font_manager.get_custom_font(font_path)

    def get_font_by_name(self, font_name: str) -> EmbeddedFont:
        return self.font_manager.get_font_by_name(font_name)

    def get_document_font(self) -> EmbeddedFont:
        return self._font

    # Page lifecycle

    def add_page(self, page_options: Optional[PageOptions] = None):
        """
        Add a page at the end of the document and select it.

        Example:
            >>> builder.add_page(PageOptions(orientation='landscape', font='Helvetica-Bold'))
            >>> builder.add_page()  # same options as the previous page
        """
        self._flush()
        self._create_page(page_options or PageOptions())
        self._page_count += 1
        self._selected_page = self._page_count
        logger.debug("Added page %d", self._page_count)

    def select_page(self, page_number: int):
        """
        Make another page the active page.

        Selecting the already active page does nothing.

        Raises:
            PageNotFoundError: If the page doesn't exist
        """
        if page_number == self._selected_page:
            return
        if not 1 <= page_number <= self._page_count:
            raise PageNotFoundError(page_number)

        self._flush()
        self._activate_file(self.store.get_page_file(page_number))
        self._selected_page = page_number
        logger.debug("Selected page %d", page_number)

    def clear_page(self):
        """Replace the active page with a blank page of the same size."""
        page = self._require_page()
        self._flush()
        document = PageDocument()
        self._activate(document, document.add_page((page.width, page.height)))

    def remove_page(self, page_number: int):
        """
        Remove a page from the document.

        Example:
            >>> builder.remove_page(1)  # Remove the first page of the document
            >>> builder.remove_page(2)  # Remove the second page of the document

        When the active page is removed, the page that takes its place (or
        the new last page) becomes active. Removing the only page leaves the
        document empty until add_page() is called.

        Raises:
            PageNotFoundError: If the page doesn't exist
        """
        if not 1 <= page_number <= self._page_count:
            raise PageNotFoundError(page_number)

        self._flush()
        self.store.remove_page(page_number)
        self._page_count -= 1

        if page_number < self._selected_page:
            self._selected_page -= 1
        elif page_number == self._selected_page:
            if self._page_count:
                self._selected_page = min(page_number, self._page_count)
                self._activate_file(self.store.get_page_file(self._selected_page))
            else:
                self._selected_page = 0
                self._document.remove_page(0)
                self._page = None
        logger.debug("Removed page %d", page_number)

    def load_pdf(self, pdf_file_path: str):
        """
        Append every page of an external PDF.

        Example:
            >>> # test.pdf has 5 pages
            >>> builder.get_number_of_pages()
            1
            >>> builder.load_pdf('test.pdf')
            >>> builder.get_number_of_pages()
            6

        Raises:
            SourceFileNotFoundError: If the file doesn't exist
        """
        validate_source_path(pdf_file_path)
        self._append_documents([pdf_file_path])

    def merge_pdf(self, pdf_files_path: List[str]):
        """
        Append every page of several external PDFs, in order.

        All paths are checked before anything is read.

        Raises:
            EmptyFileListError: If the list is empty
            SourceFileNotFoundError: If any file doesn't exist
        """
        validate_source_paths(pdf_files_path)
        self._append_documents(pdf_files_path)

    def _append_documents(self, pdf_files_path: List[str]):
        self._flush()
        for pdf_file_path in pdf_files_path:
            source = PageDocument.from_file(pdf_file_path)
            for index in source.get_page_indices():
                document = PageDocument()
                page = document.add_copied_page(document.copy_pages(source, [index])[0])
                self._page_count += 1
                self._selected_page = self._page_count
                self._activate(document, page)
                self._flush()
            logger.info("Appended %d pages from %s", source.get_page_count(), pdf_file_path)

    def save(self, file_path: str):
        """
        Save the document to `file_path` and clean up scratch storage.

        Afterwards the builder keeps only the active page, as page 1 of a new
        single-page document.

        Raises:
            NoPagesToSaveError: If the document has no pages
        """
        if not len(self.store):
            if not self._page_count:
                raise NoPagesToSaveError()
            write_bytes(file_path, self._document.save())
            logger.info("Saved 1 page to %s", file_path)
            return

        self._flush()
        self.assembler.write(self.store, file_path)
        self._page_count = 1
        self._selected_page = 1

    # Drawing

    def write_text(self, text: str, options: TextOptions):
        """
        Write a text on the active page.

        Example:
            >>> # It will write a text aligned by right direction
            >>> builder.write_text('Hello world', TextOptions(
            ...     position=Position(line_position=190, column_position=200),
            ...     align='right',
            ...     size=20,
            ... ))

        Raises:
            NegativeValueError: If the size is negative
            OutOfRangeError: If the text would cross the page margins
        """
        size = self._font_size if options.size is None else options.size
        self._check_negative("size", size)
        page = self._require_page()
        font = self.font_manager.resolve(options.font, default=self._page_font)

        width = font.width_of_text_at_size(text, size)
        height = font.height_at_size(size)
        x, y = self._normalizer().normalize_text(options.position, width, height, options.align)
        page.draw_text(text, x, y, font_name=font.name, size=size, color=options.color or self._font_color)

    def write_line(self, options: LineOptions):
        """
        Write a line on the active page.

        Example:
            >>> # A vertical red line at 100mm with 50% opacity
            >>> builder.write_line(LineOptions(
            ...     start=Position(100, 0),
            ...     end=Position(100, 297),
            ...     color=RGBA(r=1, g=0, b=0, a=0.5),
            ...     thickness=1,
            ... ))
        """
        thickness = DEFAULT_LINE_THICKNESS if options.thickness is None else options.thickness
        self._check_negative("thickness", thickness)
        page = self._require_page()
        normalizer = self._normalizer()
        start = normalizer.normalize_point(options.start)
        end = normalizer.normalize_point(options.end)
        page.draw_line(start, end, thickness=thickness, color=options.color or RGBA())

    def write_rectangle(self, options: RectangleOptions):
        """
        Write a rectangle on the active page.

        `start` is the top-left corner; the rectangle extends `area.width`
        to the right and `area.height` down the page. Both corners must lie
        inside the page margins.

        Example:
            >>> builder.write_rectangle(RectangleOptions(
            ...     start=Position(10, 50),
            ...     area=Area(width=100, height=50),
            ...     area_color=RGBA(0.95, 0.95, 0.95),
            ... ))
        """
        page = self._require_page()
        normalizer = self._normalizer()
        start = options.start
        x, y = normalizer.normalize_point(start)
        normalizer.normalize_point(Position(
            start.line_position + options.area.width,
            start.column_position + options.area.height,
        ))

        width = to_points(self._unit, options.area.width)
        height = to_points(self._unit, options.area.height)
        page.draw_rectangle(
            x,
            y - height,
            width,
            height,
            fill=options.area_color,
            border=options.border_color,
            border_width=to_points(self._unit, options.border_width),
            dash_array=options.border_dash_array,
            dash_phase=options.border_dash_phase,
            line_cap=options.border_line_cap,
        )

    # Measurements

    def get_height_at_size(self, size: float, font: FontLike = None) -> float:
        """
        Get the height of a font at `size`, in the document unit.

        Example:
            >>> builder.get_height_at_size(20, 'Helvetica-Bold')
        """
        self._check_negative("size", size)
        font = self.font_manager.resolve(font, default=self._font)
        return from_points(self._unit, font.height_at_size(size))

    def get_width_of_text_at_size(self, text: str, size: float, font: FontLike = None) -> float:
        """
        Get the width of `text` at `size`, in the document unit.

        Example:
            >>> builder.get_width_of_text_at_size('test', 20, 'Helvetica-Bold')
        """
        self._check_negative("size", size)
        font = self.font_manager.resolve(font, default=self._font)
        return from_points(self._unit, font.width_of_text_at_size(text, size))

    def get_width_of_text_at_size_by_page_font(self, text: str, size: float) -> float:
        return self.get_width_of_text_at_size(text, size)

    def get_number_of_pages(self) -> int:
        return self._page_count

    def get_selected_page(self) -> int:
        return self._selected_page

    def get_page_width(self) -> float:
        """Width of the active page in the document unit."""
        return from_points(self._unit, self._geometry.width)

    def get_page_height(self) -> float:
        """Height of the active page in the document unit."""
        return from_points(self._unit, self._geometry.height)

    def get_page_limits(self) -> PageLimits:
        """Drawable area of the active page, in points."""
        return self._geometry.limits

    @staticmethod
    def _check_negative(attribute: str, value: float):
        if value < 0:
            raise NegativeValueError(attribute, value)


def create_document(options: Optional[PageOptions] = None, scratch_dir: Optional[str] = None) -> DocumentBuilder:
    """
    Create a new document with one page.

    Args:
        options: Options for the first page
        scratch_dir: Directory for scratch files

    Returns:
        DocumentBuilder ready for drawing
    """
    return DocumentBuilder(options, scratch_dir=scratch_dir)
