"""Shared fixtures: in-memory PDFs built with PyMuPDF."""

from __future__ import annotations

import fitz
import pytest


def build_pdf(pages: list[str], metadata: dict = None) -> bytes:
    """Build a PDF with one page per entry, one text line per source line."""
    doc = fitz.open()
    if metadata:
        doc.set_metadata(metadata)
    for text in pages:
        page = doc.new_page()
        y = 72
        for line in text.split("\n"):
            if line:
                page.insert_text((72, y), line, fontsize=11)
            y += 16
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def make_pdf():
    return build_pdf


@pytest.fixture
def two_page_pdf() -> bytes:
    return build_pdf([
        "Q1 intro text\nQuestion 2 details\n1",
        "Q3 more\n2",
    ])
