"""
Page text normalization.

Two ordered rewrites applied to the text of a single PDF page:
- Whitespace collapsing (every whitespace run -> one space)
- Footer / page-number stripping ("& /en 12")
"""

import re
from typing import List, Sequence
import logging

from ..models import CleanedDocument, CleanedPage, Document

logger = logging.getLogger(__name__)


DEFAULT_FOOTER_MARKER = "& /en"
DEFAULT_MAX_PAGE_DIGITS = 3


class PageTextNormalizer:
    """
    Normalizer for per-page PDF-extracted text.

    Handles:
    - Whitespace cleanup (spaces, tabs, newlines, NBSP, ...)
    - Footer marker removal (marker + 1..N digit page number)

    Whitespace is collapsed first so a footer split across lines
    becomes a single-spaced literal before it is matched.
    """

    WHITESPACE_PATTERN = re.compile(r'\s+')

    def __init__(
        self,
        footer_marker: str = DEFAULT_FOOTER_MARKER,
        max_page_digits: int = DEFAULT_MAX_PAGE_DIGITS,
    ):
        """
        Initialize page normalizer.

        Args:
            footer_marker: Literal text preceding the page number
            max_page_digits: Maximum number of page-number digits consumed
                             after the marker (longer numbers keep their tail)
        """
        if max_page_digits < 1:
            raise ValueError("max_page_digits must be >= 1")

        self.footer_marker = footer_marker
        self.max_page_digits = max_page_digits

        # The space after the page number goes with the footer; the
        # space before it then separates the surrounding text.
        self.footer_pattern = re.compile(
            re.escape(footer_marker) + r' \d{1,%d} ?' % max_page_digits
        )

    def normalize(self, text: str) -> str:
        """
        Normalize text of one page.

        Args:
            text: Raw page text (may be empty)

        Returns:
            Text with whitespace collapsed and footers removed
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")

        if not text:
            return text

        text = self._collapse_whitespace(text)
        text = self._strip_footers(text)

        return text

    def _collapse_whitespace(self, text: str) -> str:
        """Replace every whitespace run with a single space."""
        return self.WHITESPACE_PATTERN.sub(' ', text)

    def _strip_footers(self, text: str) -> str:
        """
        Remove footer markers with their page number.

        Example: "end. & /en 12 Next" -> "end. Next"

        Removing one footer can splice together a new one
        ("& /en & /en 1 2"), so removal runs to a fixed point.
        """
        while True:
            stripped = self.footer_pattern.sub('', text)
            if stripped == text:
                return stripped
            text = stripped

    def normalize_pages(self, pages: Sequence[str]) -> List[str]:
        """
        Normalize an ordered sequence of page texts.

        Args:
            pages: Raw page texts in reading order

        Returns:
            Cleaned page texts, same length and order
        """
        return [self.normalize(page) for page in pages]

    def normalize_document(self, document: Document) -> CleanedDocument:
        """
        Normalize every page of a Document.

        The source document is left untouched.

        Args:
            document: Document with raw pages

        Returns:
            CleanedDocument with one CleanedPage per source page
        """
        cleaned_pages = [
            CleanedPage(page=page.page, text=self.normalize(page.text))
            for page in document.pages
        ]

        logger.debug(
            f"Normalized {len(cleaned_pages)} pages of {document.doc_id}"
        )

        return CleanedDocument(
            doc_id=document.doc_id,
            source_path=document.source_path,
            pages=cleaned_pages,
        )


_default_normalizer = PageTextNormalizer()


def normalize_page(text: str) -> str:
    """
    Convenience function for single-page normalization.

    Args:
        text: Raw page text

    Returns:
        Normalized text

    Example:
        >>> normalize_page("Article 1. Something.\\n\\n& /en 12 Next page text")
        'Article 1. Something. Next page text'
    """
    return _default_normalizer.normalize(text)


def normalize_document(pages: Sequence[str]) -> List[str]:
    """
    Convenience function normalizing an ordered list of page texts.

    Args:
        pages: Raw page texts in reading order

    Returns:
        Normalized page texts in the same order
    """
    return _default_normalizer.normalize_pages(pages)
