"""Tests for PageStore scratch bookkeeping."""
import os

import pytest

from pdfcompose.document_builder.page_store import PageStore
from pdfcompose.exceptions import EmptyFileListError, PageNotFoundError, SourceFileNotFoundError
from pdfcompose.utils import validate_source_paths


@pytest.fixture
def store(scratch_dir):
    return PageStore(scratch_dir)


def test_creates_scratch_dir(store, scratch_dir):
    assert os.path.isdir(scratch_dir)
    assert store.prefix.startswith(scratch_dir)
    assert store.prefix.endswith(".pdf")
    assert len(store) == 0


def test_prefix_is_random_per_store(scratch_dir):
    assert PageStore(scratch_dir).prefix != PageStore(scratch_dir).prefix


def test_write_appends_then_overwrites(store):
    first = store.write_page(1, b"one")
    second = store.write_page(2, b"two")
    assert first == store.prefix + "part1"
    assert second == store.prefix + "part2"

    assert store.write_page(1, b"uno") == first
    with open(first, "rb") as fh:
        assert fh.read() == b"uno"
    assert store.files == [first, second]


def test_write_past_end_is_rejected(store):
    with pytest.raises(PageNotFoundError):
        store.write_page(2, b"gap")


def test_remove_never_reuses_names(store):
    store.write_page(1, b"one")
    second = store.write_page(2, b"two")
    store.remove_page(1)

    third = store.write_page(2, b"three")
    assert store.files == [second, third]
    assert third == store.prefix + "part3"


def test_remove_deletes_file(store):
    file_path = store.write_page(1, b"one")
    store.remove_page(1)
    assert not os.path.exists(file_path)
    assert len(store) == 0
    with pytest.raises(PageNotFoundError):
        store.get_page_file(1)


def test_clear_tolerates_missing_files(store, caplog):
    first = store.write_page(1, b"one")
    store.write_page(2, b"two")
    os.remove(first)

    store.clear()

    assert len(store) == 0
    assert os.listdir(store.scratch_dir) == []
    assert "already missing" in caplog.text


def test_validate_source_paths(tmp_path):
    existing = tmp_path / "a.pdf"
    existing.write_bytes(b"%PDF")
    validate_source_paths([str(existing)])

    with pytest.raises(EmptyFileListError):
        validate_source_paths([])
    with pytest.raises(SourceFileNotFoundError):
        validate_source_paths([str(existing), str(tmp_path / "b.pdf")])
