"""Custom Exception Hierarchy

Exception hierarchy for pdfcompose providing granular exception types for
layout violations, page bookkeeping failures and missing source files.
"""


class PDFComposeError(Exception):
    """Base exception for all pdfcompose errors.

    This is the root of the exception hierarchy. Catching this exception
    will catch all custom exceptions raised by the library.
    """
    pass


# Layout Errors
class LayoutError(PDFComposeError):
    """Base class for errors raised while positioning content on a page."""
    pass


class OutOfRangeError(LayoutError):
    """Base class for bounds violations.

    Values are expressed in the document unit so the message matches what the
    caller passed in.
    """

    label = "Position"

    def __init__(self, value: float, limit: float, unit: str):
        self.value = value
        self.limit = limit
        self.unit = unit
        super().__init__(f"{self.label} {value} is out of range. Range: {limit}")


class OutOfRangeColumnError(OutOfRangeError):
    """Raised when a vertical position falls outside the top/bottom margins."""

    label = "Column"


class OutOfRangeColumnWithHeightError(OutOfRangeError):
    """Raised when content would cross the top margin once its height is applied."""

    label = "Column with height"


class OutOfRangeLineError(OutOfRangeError):
    """Raised when a horizontal position falls outside the left/right margins."""

    label = "Line"


class OutOfRangeLineWithWidthError(OutOfRangeError):
    """Raised when content would cross the right margin once its width is applied."""

    label = "Line with width"


class NegativeValueError(LayoutError):
    """Raised when a size or measurement argument is negative."""

    def __init__(self, attribute: str, value: float):
        self.attribute = attribute
        self.value = value
        super().__init__(f"{attribute} can't be set by negative value: {value}")


# Page Errors
class PageError(PDFComposeError):
    """Base class for page bookkeeping errors."""
    pass


class PageNotFoundError(PageError):
    """Raised when a page number has no corresponding page."""

    def __init__(self, page_number: int):
        self.page_number = page_number
        super().__init__(f"Page {page_number} does not exist")


class NoPagesToSaveError(PageError):
    """Raised when saving a document that holds no pages."""

    def __init__(self):
        super().__init__("There is no page to save")


# Source File Errors
class SourceError(PDFComposeError):
    """Base class for errors about external PDF sources."""
    pass


class EmptyFileListError(SourceError):
    """Raised when merging an empty list of PDF files."""

    def __init__(self):
        super().__init__("Pdf files path is empty")


class SourceFileNotFoundError(SourceError):
    """Raised when a source file does not exist."""

    def __init__(self, file_path: str):
        self.file_path = file_path
        super().__init__(f"File path {file_path} does not exist")


# Font Errors
class FontError(PDFComposeError):
    """Raised when a font cannot be resolved or embedded."""
    pass
