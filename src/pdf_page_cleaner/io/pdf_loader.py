"""
PDF text extraction, one string per page.

Uses PyMuPDF (fitz) to extract plain page text:
- Page numbers (1-indexed)
- Reading order preserved

Output is suitable for page-level normalization.
"""

from pathlib import Path
from typing import List
import logging

import fitz  # PyMuPDF

from ..models import Document, Page

logger = logging.getLogger(__name__)


class PDFLoadError(Exception):
    """Exception raised when PDF loading fails."""
    pass


class PDFLoader:
    """
    PDF page text extractor.

    Extracts one Page per PDF page, preserving:
    - Page numbers (1-indexed)
    - Page order (reading order)

    The page count of the returned Document always equals the
    page count of the PDF.
    """

    def __init__(self, min_page_length: int = 0):
        """
        Initialize PDF loader.

        Args:
            min_page_length: Minimum number of characters (after stripping
                             whitespace) for a page's text to be kept; shorter
                             pages are emitted with empty text.
        """
        if min_page_length < 0:
            raise ValueError("min_page_length must be >= 0")

        self.min_page_length = min_page_length

        logger.info(f"Initialized PDFLoader (min_page_length={min_page_length})")

    def load(self, pdf_path: Path) -> Document:
        """
        Load PDF and extract text of every page.

        Args:
            pdf_path: Path to PDF file

        Returns:
            Document with one Page per PDF page

        Raises:
            PDFLoadError: If PDF cannot be loaded or processed
        """
        pdf_path = Path(pdf_path)

        if not pdf_path.exists():
            raise PDFLoadError(f"PDF file not found: {pdf_path}")

        logger.info(f"Loading PDF: {pdf_path}")

        try:
            doc = fitz.open(pdf_path)
        except Exception as e:
            raise PDFLoadError(f"Failed to open PDF: {e}") from e

        try:
            pages = self._extract_pages(doc)
        finally:
            doc.close()

        logger.info(f"Extracted text from {len(pages)} pages")

        return Document(doc_id=pdf_path.stem, source_path=str(pdf_path), pages=pages)

    def load_from_bytes(
        self,
        pdf_bytes: bytes,
        filename: str = "document.pdf",
    ) -> Document:
        """
        Load PDF from bytes.

        Args:
            pdf_bytes: PDF file bytes
            filename: Filename used as document id and for logging.

        Returns:
            Document with one Page per PDF page
        """
        logger.info(f"Loading PDF from bytes: {filename}")

        try:
            doc = fitz.open(stream=pdf_bytes, filetype="pdf")
        except Exception as e:
            raise PDFLoadError(f"Failed to open PDF from bytes: {e}") from e

        try:
            pages = self._extract_pages(doc)
        finally:
            doc.close()

        logger.info(f"Extracted text from {len(pages)} pages of {filename}")
        return Document(doc_id=Path(filename).stem, pages=pages)

    def _extract_pages(self, doc) -> List[Page]:
        """
        Extract text of all pages of an open document.

        Args:
            doc: PyMuPDF document object

        Returns:
            List of Page objects in page order
        """
        if doc.needs_pass:
            raise PDFLoadError("PDF is encrypted and requires a password")

        pages: List[Page] = []

        for page_index in range(len(doc)):
            page_num = page_index + 1  # 1-indexed
            try:
                text = doc[page_index].get_text()
            except Exception as e:
                raise PDFLoadError(f"Failed to extract page {page_num}: {e}") from e

            if len(text.strip()) < self.min_page_length:
                logger.debug(f"Page {page_num}: below min_page_length, emitting empty text")
                text = ""

            pages.append(Page(page=page_num, text=text))

        return pages

    def get_page_count(self, pdf_path: Path) -> int:
        """
        Get number of pages in PDF without full extraction.

        Args:
            pdf_path: Path to PDF file

        Returns:
            Number of pages

        Raises:
            PDFLoadError: If PDF cannot be opened
        """
        try:
            doc = fitz.open(pdf_path)
        except Exception as e:
            raise PDFLoadError(f"Failed to get page count: {e}") from e

        try:
            return len(doc)
        finally:
            doc.close()

    def extract_page_text(self, pdf_path: Path, page_num: int) -> str:
        """
        Extract raw text from a single page.

        Args:
            pdf_path: Path to PDF file
            page_num: Page number (1-indexed)

        Returns:
            Text content of the page
        """
        try:
            doc = fitz.open(pdf_path)
        except Exception as e:
            raise PDFLoadError(f"Failed to open PDF: {e}") from e

        try:
            if page_num < 1 or page_num > len(doc):
                raise PDFLoadError(
                    f"Invalid page number {page_num} (PDF has {len(doc)} pages)"
                )
            return doc[page_num - 1].get_text()  # Convert to 0-indexed
        finally:
            doc.close()


def load_pdf(pdf_path: Path, min_page_length: int = 0) -> Document:
    """
    Convenience function to load PDF pages.

    Args:
        pdf_path: Path to PDF file
        min_page_length: See PDFLoader

    Returns:
        Document with raw page texts
    """
    loader = PDFLoader(min_page_length=min_page_length)
    return loader.load(pdf_path)
