"""Document Builder Package

This package provides components for composing PDF documents page by page:

Core Classes:
- DocumentBuilder: Page lifecycle and drawing API (from builder.py)
- FontManager: Font resolution and text measurement
- PositionNormalizer: Unit conversion, alignment and bounds checks
- PageDocument: In-memory document handle
- PageStore: Scratch storage for finished pages
- DocumentAssembler: Final output assembly

Utilities:
- coordinate_utils: Unit conversion and page geometry functions

Helper Functions:
- create_document: Create a DocumentBuilder with its first page
"""

# Import core classes
from .builder import DocumentBuilder, create_document
from .font_manager import EmbeddedFont, FontManager
from .position_normalizer import PositionNormalizer
from .page_document import PageDocument, PageSlot
from .page_store import PageStore
from .assembler import DocumentAssembler, assemble_pages
from . import coordinate_utils

# Expose public API
__all__ = [
    # Main builder class
    'DocumentBuilder',

    # Helper functions
    'create_document',
    'assemble_pages',

    # Component classes
    'EmbeddedFont',
    'FontManager',
    'PositionNormalizer',
    'PageDocument',
    'PageSlot',
    'PageStore',
    'DocumentAssembler',

    # Utilities module
    'coordinate_utils',
]
