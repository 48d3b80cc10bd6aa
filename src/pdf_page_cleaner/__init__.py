"""
PDF Page Cleaner

Extracts per-page text from PDF documents and normalizes it
(whitespace collapsing, footer/page-number stripping) for
downstream corpus construction and topic modelling.
"""

__version__ = "0.1.0"

# Core models - convenient imports
from .models import (
    Page,
    CleanedPage,
    Document,
    CleanedDocument,
)

# Normalization
from .preprocess import PageTextNormalizer, normalize_page, normalize_document

# I/O utilities
from .io import PDFLoader, PDFLoadError, load_pdf

__all__ = [
    # Models
    "Page",
    "CleanedPage",
    "Document",
    "CleanedDocument",
    # Normalization
    "PageTextNormalizer",
    "normalize_page",
    "normalize_document",
    # I/O
    "PDFLoader",
    "PDFLoadError",
    "load_pdf",
]
