"""Document Assembler Module

Flattens the scratch record into the final output file.
"""
import logging
from typing import Sequence

from pypdf import PdfReader

from ..utils import write_bytes
from .page_document import PageDocument
from .page_store import PageStore

logger = logging.getLogger(__name__)


def assemble_pages(page_files: Sequence[str]) -> PageDocument:
    """
    Build a clean document from the first page of every scratch file.

    Args:
        page_files: Scratch files in document order

    Returns:
        PageDocument with one page per file, in the same order
    """
    document = PageDocument()
    for page_file in page_files:
        reader = PdfReader(page_file)
        document.add_copied_page(reader.pages[0])
    return document


class DocumentAssembler:
    """Writes the pages recorded in a PageStore to one output file."""

    def write(self, store: PageStore, file_path: str) -> int:
        """
        Assemble the record into `file_path`, then clean scratch storage.

        Scratch files are deleted and the record cleared only after the output
        has been written; a failure before that leaves both untouched.

        Returns:
            Number of pages written
        """
        page_files = store.files
        document = assemble_pages(page_files)
        write_bytes(file_path, document.save())
        store.clear()
        logger.info("Saved %d pages to %s", len(page_files), file_path)
        return len(page_files)
