"""Text preprocessing utilities for PDF Page Cleaner."""

from .normalizer import PageTextNormalizer, normalize_page, normalize_document

__all__ = [
    "PageTextNormalizer",
    "normalize_page",
    "normalize_document",
]
