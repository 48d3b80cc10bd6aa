"""
Output of cleaned documents for downstream corpus construction.

Formats:
- json: full CleanedDocument (pages + metadata)
- txt:  pages reassembled into one document string
- csv:  one row per page (doc_id, page, text)
"""

from pathlib import Path
from typing import Iterable
import json
import logging

import pandas as pd

from ..models import CleanedDocument

logger = logging.getLogger(__name__)

CORPUS_COLUMNS = ["doc_id", "page", "text"]
OUTPUT_FORMATS = ("json", "txt", "csv")


def _ensure_parent(path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def write_json(doc: CleanedDocument, path: Path) -> Path:
    """Write the document as UTF-8 JSON."""
    path = _ensure_parent(path)
    path.write_text(
        json.dumps(doc.model_dump(), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    logger.info("Wrote %s (%d pages) to %s", doc.doc_id, doc.page_count, path)
    return path


def write_text(doc: CleanedDocument, path: Path, separator: str = " ") -> Path:
    """Write the reassembled document text."""
    path = _ensure_parent(path)
    path.write_text(doc.text(separator=separator), encoding="utf-8")
    logger.info("Wrote %s text to %s", doc.doc_id, path)
    return path


def to_dataframe(docs: Iterable[CleanedDocument]) -> pd.DataFrame:
    """
    Build a page-level corpus table.

    Rows keep document order first, then page order.
    """
    records = [record for doc in docs for record in doc.to_records()]
    return pd.DataFrame.from_records(records, columns=CORPUS_COLUMNS)


def write_corpus_csv(docs: Iterable[CleanedDocument], path: Path) -> Path:
    """Write every page of every document to one CSV file."""
    path = _ensure_parent(path)
    df = to_dataframe(docs)
    df.to_csv(path, index=False, encoding="utf-8")
    logger.info("Wrote corpus with %d pages to %s", len(df), path)
    return path


def write_document(doc: CleanedDocument, path: Path, fmt: str = "json") -> Path:
    """
    Write a single document in the given format.

    Raises:
        ValueError: If fmt is not one of OUTPUT_FORMATS
    """
    if fmt == "json":
        return write_json(doc, path)
    if fmt == "txt":
        return write_text(doc, path)
    if fmt == "csv":
        return write_corpus_csv([doc], path)
    raise ValueError(f"Unknown output format: {fmt!r} (expected one of {OUTPUT_FORMATS})")
