"""
Core data models for PDF Page Cleaner.

All models use Pydantic for validation and JSON serialization.
"""

from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field, field_validator


# ============================================================================
# Page Models
# ============================================================================

class Page(BaseModel):
    """One page of text as produced by PDF text extraction."""

    page: int = Field(..., description="Page number (1-indexed)")
    text: str = Field("", description="Raw extracted text")

    model_config = {
        "json_schema_extra": {
            "example": {
                "page": 3,
                "text": "Article 1.\nThe Parliament shall\n\n& /en 3\n",
            }
        }
    }

    @field_validator("page")
    @classmethod
    def validate_page(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Page number must be >= 1")
        return v


class CleanedPage(Page):
    """Page text after normalization; keeps the source page number."""

    text: str = Field("", description="Normalized text")

    model_config = {
        "json_schema_extra": {
            "example": {
                "page": 3,
                "text": "Article 1. The Parliament shall ",
            }
        }
    }


def _validate_page_order(pages: List[Page]) -> List[Page]:
    previous = 0
    for page in pages:
        if page.page <= previous:
            raise ValueError("Pages must be in strictly increasing page order")
        previous = page.page
    return pages


# ============================================================================
# Document Models
# ============================================================================

class Document(BaseModel):
    """Ordered sequence of raw pages making up one source file."""

    doc_id: str = Field(..., description="Document identifier (usually file stem)")
    source_path: Optional[str] = Field(None, description="Path of the source PDF")
    pages: List[Page] = Field(default_factory=list, description="Pages in reading order")

    @field_validator("pages")
    @classmethod
    def validate_pages(cls, v: List[Page]) -> List[Page]:
        return _validate_page_order(v)

    @property
    def page_count(self) -> int:
        return len(self.pages)


class CleanedDocument(BaseModel):
    """Normalized counterpart of a Document."""

    doc_id: str = Field(..., description="Document identifier")
    source_path: Optional[str] = Field(None, description="Path of the source PDF")
    pages: List[CleanedPage] = Field(default_factory=list, description="Cleaned pages in reading order")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Processing metadata")

    model_config = {
        "json_schema_extra": {
            "example": {
                "doc_id": "plenary_2019_01",
                "source_path": "data/plenary_2019_01.pdf",
                "pages": [
                    {"page": 1, "text": "Article 1. Something."},
                    {"page": 2, "text": " Next page text"},
                ],
                "metadata": {"pipeline_version": "0.1.0", "num_pages": 2},
            }
        }
    }

    @field_validator("pages")
    @classmethod
    def validate_pages(cls, v: List[CleanedPage]) -> List[CleanedPage]:
        return _validate_page_order(v)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def text(self, separator: str = " ") -> str:
        """
        Reassemble page texts into one document string.

        Page boundary spaces are stripped and blank pages skipped, so
        the separator is the only text between two pages.
        """
        texts = (page.text.strip() for page in self.pages)
        return separator.join(text for text in texts if text)

    def to_records(self) -> List[Dict[str, Any]]:
        """One {doc_id, page, text} record per page, in page order."""
        return [
            {"doc_id": self.doc_id, "page": page.page, "text": page.text}
            for page in self.pages
        ]
