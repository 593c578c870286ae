"""Tests for PageDocument and PageSlot."""
import io

import pytest
from pypdf import PdfReader

from pdfcompose.document_builder.page_document import PageDocument
from pdfcompose.exceptions import PageNotFoundError
from pdfcompose.layout_options import RGBA, LineCap


def _read(data):
    return PdfReader(io.BytesIO(data))


def test_blank_page_has_requested_size():
    document = PageDocument()
    document.add_page((300, 400))

    reader = _read(document.save())
    assert len(reader.pages) == 1
    assert float(reader.pages[0].mediabox.width) == 300
    assert float(reader.pages[0].mediabox.height) == 400


def test_draw_text_is_rendered():
    document = PageDocument()
    page = document.add_page((300, 400))
    page.draw_text("Hello page", 20, 200, size=12)

    reader = _read(document.save())
    assert "Hello page" in reader.pages[0].extract_text()


@pytest.mark.filterwarnings("error::DeprecationWarning")
def test_drawing_on_loaded_page_keeps_existing_content(make_pdf, tmp_path):
    document = PageDocument.from_file(make_pdf("base.pdf", "Base text"))
    slot = document.get_page(0)
    assert (slot.width, slot.height) == (400, 400)
    slot.draw_text("Overlay text", 50, 100, size=12)

    # a second round trip must keep both layers
    saved = tmp_path / "saved.pdf"
    saved.write_bytes(document.save())
    reloaded = PageDocument.from_file(str(saved))
    reloaded.get_page(0).draw_line((10, 10), (100, 10), 1, RGBA())
    text = _read(reloaded.save()).pages[0].extract_text()
    assert "Base text" in text
    assert "Overlay text" in text


@pytest.mark.filterwarnings("error::DeprecationWarning")
def test_drawing_after_render_merges_onto_rendered_page():
    document = PageDocument()
    page = document.add_page((300, 400))
    page.draw_text("Before", 20, 200, size=12)
    document.save()
    page.draw_text("After", 20, 100, size=12)

    text = _read(document.save()).pages[0].extract_text()
    assert "Before" in text
    assert "After" in text


@pytest.mark.filterwarnings("error::DeprecationWarning")
def test_drawing_on_blank_rendered_page():
    document = PageDocument()
    page = document.add_page((300, 400))
    document.save()
    page.draw_text("Late", 20, 200, size=12)

    assert "Late" in _read(document.save()).pages[0].extract_text()


def test_rectangle_without_fill_or_border_draws_nothing():
    document = PageDocument()
    page = document.add_page((300, 400))
    page.draw_rectangle(10, 10, 50, 50)
    assert page._canvas is None

    page.draw_rectangle(10, 10, 50, 50, fill=RGBA(1, 0, 0, 0.5), border_width=2,
                        dash_array=[3, 1], line_cap=LineCap.ROUND)
    assert page._canvas is not None
    document.save()


def test_copy_pages_renders_source_pages(make_pdf):
    source = PageDocument.from_file(make_pdf("source.pdf", "One", "Two", "Three"))
    target = PageDocument()
    for page in target.copy_pages(source, [2, 0]):
        target.add_copied_page(page)

    texts = [page.extract_text() for page in _read(target.save()).pages]
    assert "Three" in texts[0]
    assert "One" in texts[1]


def test_page_indices(make_pdf):
    document = PageDocument.from_file(make_pdf("source.pdf", "One", "Two"))
    assert document.get_page_indices() == [0, 1]
    assert document.get_page_count() == 2
    with pytest.raises(PageNotFoundError):
        document.get_page(2)


def test_load_from_bytes(make_pdf):
    with open(make_pdf("source.pdf", "One", "Two"), "rb") as fh:
        document = PageDocument.load(fh.read())
    assert document.get_page_count() == 2


def test_remove_page(make_pdf):
    document = PageDocument.from_file(make_pdf("source.pdf", "One", "Two"))
    document.remove_page(0)

    assert document.get_page_count() == 1
    assert "Two" in _read(document.save()).pages[0].extract_text()
    with pytest.raises(PageNotFoundError):
        document.remove_page(5)
