"""Utilities Module

Helper functions for scratch storage and source file validation.
"""
import os
import secrets
from typing import List

from .config import SCRATCH_PREFIX_BYTES
from .exceptions import EmptyFileListError, SourceFileNotFoundError


def validate_source_path(pdf_path: str) -> None:
    """
    Validate that a source PDF exists.

    Args:
        pdf_path: Path to PDF file

    Raises:
        SourceFileNotFoundError: If the file doesn't exist
    """
    if not pdf_path or not os.path.exists(pdf_path):
        raise SourceFileNotFoundError(pdf_path)


def validate_source_paths(pdf_paths: List[str]) -> None:
    """
    Validate a list of source PDFs before any of them is read.

    Raises:
        EmptyFileListError: If the list is empty
        SourceFileNotFoundError: For the first path that doesn't exist
    """
    if not pdf_paths:
        raise EmptyFileListError()
    for pdf_path in pdf_paths:
        validate_source_path(pdf_path)


def ensure_directory(path: str) -> str:
    """Create `path` (and parents) if it doesn't exist yet and return it."""
    os.makedirs(path, exist_ok=True)
    return path


def make_scratch_prefix(scratch_dir: str) -> str:
    """
    Build the per-document scratch file prefix.

    Returns:
        `<scratch_dir>/<10 random hex chars>.pdf`; page files append `part<N>`
    """
    return os.path.join(scratch_dir, f"{secrets.token_hex(SCRATCH_PREFIX_BYTES)}.pdf")


def scratch_page_path(prefix: str, part_number: int) -> str:
    return f"{prefix}part{part_number}"


def read_bytes(file_path: str) -> bytes:
    with open(file_path, "rb") as fh:
        return fh.read()


def write_bytes(file_path: str, data: bytes) -> None:
    """Write `data` to `file_path`, replacing any previous content."""
    with open(file_path, "wb") as fh:
        fh.write(data)
