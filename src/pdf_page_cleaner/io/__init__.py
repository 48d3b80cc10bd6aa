"""I/O utilities for PDF Page Cleaner."""

from .pdf_loader import PDFLoader, PDFLoadError, load_pdf
from .corpus_writer import (
    to_dataframe,
    write_corpus_csv,
    write_document,
    write_json,
    write_text,
)

__all__ = [
    "PDFLoader",
    "PDFLoadError",
    "load_pdf",
    "to_dataframe",
    "write_corpus_csv",
    "write_document",
    "write_json",
    "write_text",
]
