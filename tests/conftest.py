from pathlib import Path
from typing import List

import fitz
import pytest


def build_pdf(page_lines: List[List[str]]) -> bytes:
    """Build an in-memory PDF, one list of text lines per page."""
    doc = fitz.open()
    try:
        for lines in page_lines:
            page = doc.new_page()
            y = 72
            for line in lines:
                page.insert_text((72, y), line)
                y += 20
        return doc.tobytes()
    finally:
        doc.close()


@pytest.fixture
def make_pdf(tmp_path):
    """Write a PDF with the given page lines and return its path."""

    def _make(name: str, page_lines: List[List[str]]) -> Path:
        path = tmp_path / name
        path.write_bytes(build_pdf(page_lines))
        return path

    return _make


@pytest.fixture
def pdf_bytes():
    """Build PDF bytes from page lines without touching disk."""
    return build_pdf
