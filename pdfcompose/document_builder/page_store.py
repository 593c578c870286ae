"""Page Store Module

Scratch storage for finished pages. Every persisted page is written as an
independent single-page PDF, and the store keeps the ordered record of those
files (page 1 first).

File names are `<prefix>part<N>` where N comes from a counter that only ever
grows, so removing a page never lets a later page reuse a name that is still
on disk. Positions in the record and numbers in file names therefore stop
matching after a removal; always go through the record.
"""
import logging
import os
from typing import List

from ..exceptions import PageNotFoundError
from ..utils import ensure_directory, make_scratch_prefix, scratch_page_path, write_bytes

logger = logging.getLogger(__name__)


class PageStore:
    """Ordered record of scratch files, one per persisted page.

    Attributes:
        scratch_dir: Directory holding the scratch files
        prefix: Random per-document file prefix inside scratch_dir
    """

    def __init__(self, scratch_dir: str):
        self.scratch_dir = ensure_directory(scratch_dir)
        self.prefix = make_scratch_prefix(self.scratch_dir)
        self._files: List[str] = []
        self._next_part = 1

    def __len__(self) -> int:
        return len(self._files)

    @property
    def files(self) -> List[str]:
        return list(self._files)

    def has_page(self, page_number: int) -> bool:
        return 1 <= page_number <= len(self._files)

    def get_page_file(self, page_number: int) -> str:
        """
        Get the scratch file of a page.

        Raises:
            PageNotFoundError: If the page has no record
        """
        if not self.has_page(page_number):
            raise PageNotFoundError(page_number)
        return self._files[page_number - 1]

    def write_page(self, page_number: int, data: bytes) -> str:
        """
        Persist a page, overwriting its previous scratch file.

        `page_number` may be one past the end of the record, in which case a
        new slot is appended.

        Returns:
            Path of the scratch file
        """
        if page_number == len(self._files) + 1:
            file_path = scratch_page_path(self.prefix, self._next_part)
            self._next_part += 1
            write_bytes(file_path, data)
            self._files.append(file_path)
        else:
            file_path = self.get_page_file(page_number)
            write_bytes(file_path, data)
        return file_path

    def remove_page(self, page_number: int) -> None:
        """Delete a page's scratch file and drop it from the record."""
        file_path = self.get_page_file(page_number)
        self._delete_file(file_path)
        del self._files[page_number - 1]

    def clear(self) -> None:
        """Delete every scratch file still on disk and empty the record."""
        for file_path in self._files:
            self._delete_file(file_path)
        self._files = []

    @staticmethod
    def _delete_file(file_path: str) -> None:
        if os.path.exists(file_path):
            os.remove(file_path)
        else:
            logger.warning("Scratch file already missing: %s", file_path)
