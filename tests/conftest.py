"""Shared fixtures for pdfcompose tests."""
import os

import pytest
import reportlab
from pypdf import PdfReader
from reportlab.pdfgen import canvas as pdfcanvas

from pdfcompose import PageOptions, PageSize, create_document


@pytest.fixture
def scratch_dir(tmp_path):
    """Per-test scratch directory so leftovers can be inspected."""
    return str(tmp_path / "scratch")


@pytest.fixture
def builder(scratch_dir):
    """A 600x800 pt document with no margins."""
    return create_document(
        PageOptions(unit="pt", page_size=PageSize(line=600, column=800)),
        scratch_dir=scratch_dir,
    )


@pytest.fixture
def make_pdf(tmp_path):
    """Factory writing a PDF with one page per text label."""

    def _make_pdf(name, *labels):
        file_path = str(tmp_path / name)
        pdf = pdfcanvas.Canvas(file_path, pagesize=(400, 400))
        for label in labels:
            pdf.setFont("Helvetica", 12)
            pdf.drawString(50, 200, label)
            pdf.showPage()
        pdf.save()
        return file_path

    return _make_pdf


@pytest.fixture
def vera_font_path():
    """TrueType font bundled with ReportLab."""
    return os.path.join(os.path.dirname(reportlab.__file__), "fonts", "Vera.ttf")


@pytest.fixture
def page_texts():
    """Reader returning the extracted text of every page of a PDF."""

    def _page_texts(file_path):
        return [page.extract_text() or "" for page in PdfReader(file_path).pages]

    return _page_texts
